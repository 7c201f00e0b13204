"""SiPintar: school attendance web app.

Organized by feature modules (users, students, attendance, analysis, ...)
with a thin Flask controller layer over service/repository layers. Data lives
in a Google Spreadsheet reached through the ``sheets`` gateway.
"""
