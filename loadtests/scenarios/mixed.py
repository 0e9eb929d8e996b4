"""Mixed ledger workload scenario.

Combines the stocking, transfer and browsing journeys with weights that
model a warehouse back office: mostly reads, steady writes. This is the
recommended scenario for load baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.ledger import BrowsingTasks, StockingJourney, TransferJourney


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload simulating concurrent warehouse operators.

    Weight distribution:
    - Browsing (55%): listings, searches, dashboard and activity
    - Stocking (25%): new warehouses and items, quantity top-ups
    - Transfers (20%): split, merge and move paths
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowsingTasks: 11,
        StockingJourney: 5,
        TransferJourney: 4,
    }
