from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/students", endpoint="students")
    @login_required
    def students():
        q = request.args.get("q", "")
        rows = container.student_service.search(q)
        return render_template("students.html", students=rows, q=q, active_page="students")

    @app.route("/students/refresh", methods=["POST"], endpoint="students_refresh")
    @login_required
    def students_refresh():
        container.student_service.refresh()
        flash("Data siswa diperbarui.", "info")
        return redirect(url_for("students"))
