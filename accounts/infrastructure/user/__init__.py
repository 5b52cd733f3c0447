"""User/session store implementations."""
