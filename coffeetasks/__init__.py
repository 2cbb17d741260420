"""Coffee-shop task tracker backend: admin API and daily task fan-out."""
