"""Seed Dataset: the fixed user records every process starts from.

Invariants:
    - Ids are unique and run 1..len(SEED_USERS) so the store counter starts at len + 1
    - Every record carries id, first_name, last_name, city, country
    - Tuple of dicts: the store copies each record, this module is never mutated
"""

SEED_USERS: tuple[dict, ...] = (
    {"id": 1, "first_name": "Jacqueline", "last_name": "Ferris", "city": "Lisbon", "country": "Portugal"},
    {"id": 2, "first_name": "Oswaldo", "last_name": "Mendes", "city": "Curitiba", "country": "Brazil"},
    {"id": 3, "first_name": "Hiroshi", "last_name": "Tanaka", "city": "Osaka", "country": "Japan"},
    {"id": 4, "first_name": "Marguerite", "last_name": "Dubois", "city": "Lyon", "country": "France"},
    {"id": 5, "first_name": "Kwame", "last_name": "Mensah", "city": "Accra", "country": "Ghana"},
    {"id": 6, "first_name": "Ingrid", "last_name": "Halvorsen", "city": "Bergen", "country": "Norway"},
    {"id": 7, "first_name": "Rafael", "last_name": "Ortega", "city": "Valencia", "country": "Spain"},
    {"id": 8, "first_name": "Priya", "last_name": "Raman", "city": "Chennai", "country": "India"},
    {"id": 9, "first_name": "Tobias", "last_name": "Becker", "city": "Leipzig", "country": "Germany"},
    {"id": 10, "first_name": "Amelia", "last_name": "Hughes", "city": "Cardiff", "country": "UK"},
    {"id": 11, "first_name": "Mateo", "last_name": "Rossi", "city": "Turin", "country": "Italy"},
    {"id": 12, "first_name": "Leilani", "last_name": "Kahale", "city": "Honolulu", "country": "US"},
    {"id": 13, "first_name": "Sven", "last_name": "Lindqvist", "city": "Uppsala", "country": "Sweden"},
    {"id": 14, "first_name": "Chiara", "last_name": "Bianchi", "city": "Milan", "country": "Italy"},
)
