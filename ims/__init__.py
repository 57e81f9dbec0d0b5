"""
IMS records service.

Registers for an integrated management system: audit schedule, improvement
register, interested parties, organisational context, maintenance and
calibration schedule, and legal register.
"""
