"""Tanod Monitoring package.

Attendance and incident reporting for a neighborhood patrol program, organized
by feature modules (identity, attendance, reports, dashboard) with a thin Flask
controller layer over service/repository layers.
"""
