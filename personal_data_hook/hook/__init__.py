"""Pre-operation validation hook for personal data records.

Normalizes the phone number and the identity documents (national ID,
state ID, driver's license) of a ``personal_data`` record to digits only,
and aborts the operation when another record already holds one of the
documents.
"""
