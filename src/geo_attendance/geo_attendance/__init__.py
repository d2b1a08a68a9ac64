"""Geofenced attendance service package.

Organized by feature modules (geo, staff, attendance, recognition) with a thin
Flask controller layer over service and repository layers. Staff, zones and the
attendance ledger live in Google Sheets; face matching is delegated to CompreFace.
"""
