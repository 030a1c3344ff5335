"""Services for killallgit.

The cleanup decision engine is split into small services:
- protection_service: which branch names may never be deleted
- scope_resolver: local versus remote target of a pattern
- pattern_filter: regular-expression filtering of listed names
- selection_service: interactive choice and confirmation state machine
- batch_deleter: failure-tolerant sequential deletion
- display_service: console rendering of results
"""
