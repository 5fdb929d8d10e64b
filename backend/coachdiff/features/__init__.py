"""Feature packages: matches, players and coaching."""
