"""Host execution pipeline.

Runs registered pre-operation hooks for every create and update of a
``personal_data`` record and persists the resulting change-set.
"""
