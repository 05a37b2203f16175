"""Split, settlement and bill bookkeeping services."""
