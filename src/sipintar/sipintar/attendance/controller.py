from __future__ import annotations

import logging
from dataclasses import replace

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.web import criteria_from_args, criteria_to_args, current_teacher, login_required, record_to_json
from ..container import Container
from ..core.constants import ALL, LESSON_HOURS
from ..core.enums import AttendanceStatus, Period, SubmissionOutcome
from ..core.exceptions import ValidationError
from .filters import filter_records, unique_classes, unique_groups
from .model import FilterCriteria
from .service import is_all_marked, parse_draft

logger = logging.getLogger(__name__)


def _drop_stale_group(criteria: FilterCriteria, groups) -> FilterCriteria:
    """A rombel left over from another class resets to "all"."""
    if criteria.group_filter != ALL and criteria.group_filter not in groups:
        return replace(criteria, group_filter=ALL)
    return criteria


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        return redirect(url_for("attendance_form"))

    @app.route("/attendance", methods=["GET"], endpoint="attendance_form")
    @login_required
    def attendance_form():
        lesson_hour = request.args.get("lesson_hour", "")
        class_name = request.args.get("class", "")
        group_name = request.args.get("rombel", "")

        groups = container.student_service.groups(class_name)
        if group_name not in groups:
            group_name = ""

        students = container.attendance_service.students_for(class_name, group_name)
        return render_template(
            "attendance_form.html",
            lesson_hours=LESSON_HOURS,
            statuses=list(AttendanceStatus),
            classes=container.student_service.classes(),
            groups=groups,
            students=students,
            lesson_hour=lesson_hour,
            selected_class=class_name,
            selected_group=group_name,
            active_page="attendance",
        )

    @app.route("/attendance", methods=["POST"], endpoint="attendance_submit")
    @login_required
    def attendance_submit():
        lesson_hour = request.form.get("lesson_hour", "")
        class_name = request.form.get("class", "")
        group_name = request.form.get("rombel", "")
        back = url_for("attendance_form", lesson_hour=lesson_hour, **{"class": class_name, "rombel": group_name})

        students = container.attendance_service.students_for(class_name, group_name)
        draft = parse_draft(request.form, students)
        if not is_all_marked(students, draft):
            flash("Lengkapi semua status siswa sebelum mengirim", "warning")
            return redirect(back)

        try:
            result = container.attendance_service.submit(
                teacher=current_teacher(),
                lesson_hour=lesson_hour,
                class_name=class_name,
                group_name=group_name,
                draft=draft,
            )
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(back)
        except Exception:
            logger.exception("Attendance submission failed")
            flash("Kesalahan sistem saat mengirim absensi", "danger")
            return redirect(back)

        if result.outcome == SubmissionOutcome.FULL_SUCCESS:
            flash(result.message, "success")
            return redirect(url_for("attendance_form", lesson_hour=lesson_hour, **{"class": class_name}))

        flash(result.message, "danger")
        return redirect(back)

    @app.route("/history", endpoint="history")
    @login_required
    def history():
        records = container.history.records()
        criteria = criteria_from_args(request.args)
        groups = unique_groups(records, criteria.class_filter)
        criteria = _drop_stale_group(criteria, groups)
        rows = filter_records(records, criteria)
        return render_template(
            "history.html",
            rows=rows,
            total=len(records),
            classes=unique_classes(records),
            groups=groups,
            periods=list(Period),
            filters=criteria_to_args(criteria),
            active_page="history",
        )

    @app.route("/history/refresh", methods=["POST"], endpoint="history_refresh")
    @login_required
    def history_refresh():
        container.history.refresh()
        flash("Data kehadiran diperbarui.", "info")
        return redirect(url_for("history"))

    @app.route("/api/history", endpoint="api_history")
    @login_required
    def api_history():
        records = container.history.records()
        criteria = criteria_from_args(request.args)
        groups = unique_groups(records, criteria.class_filter)
        criteria = _drop_stale_group(criteria, groups)
        rows = filter_records(records, criteria)
        return jsonify(
            {
                "success": True,
                "total": len(rows),
                "records": [record_to_json(r) for r in rows],
                "classes": unique_classes(records),
                "rombels": groups,
            }
        )
