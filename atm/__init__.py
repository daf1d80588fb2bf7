"""ATM simulator: account ledger, directory and console session."""
