from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "username" in session:
            return redirect(url_for("attendance_form"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                s_teacher = container.auth_service.authenticate(username, password)

                session["username"] = s_teacher.username
                session["name"] = s_teacher.name

                logger.info("Teacher %s logged in", s_teacher.username)
                return redirect(url_for("attendance_form"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Login failed")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"Kesalahan sistem saat login: {e}", "danger")
                else:
                    flash("Kesalahan sistem saat login", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Anda telah keluar.", "info")
        return redirect(url_for("login"))
