"""Domain services: phase state machine, tally engine and guard predicates."""
