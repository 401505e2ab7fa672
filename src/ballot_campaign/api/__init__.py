"""HTTP surface for the ballot campaign."""
