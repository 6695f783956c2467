"""Employee Portal package.

Feature modules (users, calendar) each carry their own model, service and a
thin Flask controller; repositories sit behind Protocol interfaces.
"""
