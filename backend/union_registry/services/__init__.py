"""Business operations; each mutating call commits its write and audit entry together."""
