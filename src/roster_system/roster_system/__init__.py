"""Roster & attendance administration package.

Organized by feature modules (teams, players, rosters, attendance, reports,
paging) with a thin Flask controller layer over service/repository layers.
"""
