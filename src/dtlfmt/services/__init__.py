"""Service layer — wraps the DTL core in ServiceResult envelopes."""
