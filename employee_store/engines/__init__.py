"""
Read-side engines for the employee store.

Engines hold a reference to the store and nothing else; every call projects
the store's current contents.
"""

from employee_store.engines.aggregation import AggregationEngine
from employee_store.engines.ordering import Ordering, OrderingEngine
from employee_store.engines.query import QueryEngine

__all__ = [
    "AggregationEngine",
    "Ordering",
    "OrderingEngine",
    "QueryEngine",
]
