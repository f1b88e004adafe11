# SQLite INTEGER is a signed 64-bit value; anything wider never reaches the store.
DB_INT_MIN = -(2**63)
DB_INT_MAX = 2**63 - 1
