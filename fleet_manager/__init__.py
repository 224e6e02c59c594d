"""Fleet manager core package.

Houses the reminder to notification engine, the service completion workflow
and the audit trail shared by both.
"""
