"""Pure aggregation over records already fetched for one account.

Nothing in this package touches the database, the session or the web layer:
callers pass the account's records (and `today` when they care about the
calendar) explicitly.
"""
