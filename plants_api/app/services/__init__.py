"""
Service layer abstraction.

Services encapsulate the operations exposed by the API and delegate
persistence to the repositories, so API handlers never touch SQL.
"""
