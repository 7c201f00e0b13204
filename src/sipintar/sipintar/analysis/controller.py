from __future__ import annotations

from flask import Flask, jsonify, render_template, request

from ..common.web import criteria_from_args, criteria_to_args, login_required
from ..container import Container
from ..core.constants import SUMMARY_RECORD_LIMIT
from ..core.enums import AttendanceStatus, Period
from ..insights.service import FAILED_MESSAGE
from .service import AnalysisReport


def _stats_to_json(report: AnalysisReport):
    if report.stats is None:
        return None
    return {
        "total": report.stats.total,
        "counts": {s.value: report.stats.count(s) for s in AttendanceStatus},
        "attendanceRate": round(report.stats.attendance_rate, 1),
    }


def register(app: Flask, container: Container) -> None:
    def _render(report: AnalysisReport, criteria, insight=None):
        return render_template(
            "analysis.html",
            report=report,
            classes=report.classes,
            statuses=list(AttendanceStatus),
            periods=list(Period),
            filters=criteria_to_args(criteria),
            insight=insight,
            insight_enabled=container.insight_service.enabled,
            active_page="analysis",
        )

    def _insight(report: AnalysisReport) -> str:
        summary = container.insight_service.summarize(report.records[:SUMMARY_RECORD_LIMIT])
        return summary or FAILED_MESSAGE

    @app.route("/analysis", endpoint="analysis")
    @login_required
    def analysis():
        criteria = criteria_from_args(request.args)
        report = container.analysis_service.build_report(criteria)
        return _render(report, criteria)

    @app.route("/analysis/insight", methods=["POST"], endpoint="analysis_insight")
    @login_required
    def analysis_insight():
        criteria = criteria_from_args(request.form)
        report = container.analysis_service.build_report(criteria)
        insight = None if report.is_empty else _insight(report)
        return _render(report, criteria, insight=insight)

    @app.route("/api/analysis", endpoint="api_analysis")
    @login_required
    def api_analysis():
        criteria = criteria_from_args(request.args)
        report = container.analysis_service.build_report(criteria)
        return jsonify({"success": True, "classes": report.classes, "stats": _stats_to_json(report)})

    @app.route("/api/analysis/insight", methods=["POST"], endpoint="api_analysis_insight")
    @login_required
    def api_analysis_insight():
        criteria = criteria_from_args(request.get_json(silent=True) or {})
        report = container.analysis_service.build_report(criteria)
        if report.is_empty:
            return jsonify({"success": False, "message": "Tidak ada data untuk dianalisa"}), 400

        summary = container.insight_service.summarize(report.records[:SUMMARY_RECORD_LIMIT])
        if not summary:
            return jsonify({"success": False, "message": FAILED_MESSAGE})
        return jsonify({"success": True, "summary": summary})
