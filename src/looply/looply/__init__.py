"""Looply package.

Daily end-of-day (EOD) reporting for small teams, organized by feature modules
(companies, reports, shifts, users) with a thin Flask controller layer over
service/repository layers.
"""
