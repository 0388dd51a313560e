"""Framework adapters serving tiered logs."""
