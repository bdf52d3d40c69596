"""FullBright API: HWID-bound accounts and admin panel."""
