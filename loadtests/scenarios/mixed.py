"""Mixed workload scenario.

Storefront and back-office journeys weighted the way a small shop's
traffic looks. This is the recommended scenario for baselines.
"""

from locust import HttpUser, between

from loadtests.scenarios.back_office import CatalogMaintenanceJourney, OrderTriageJourney
from loadtests.scenarios.storefront import BrowsingJourney, CheckoutJourney, ContactJourney


class MixedWorkloadUser(HttpUser):
    """Weights:

    Storefront (90%):
    - Browsing: the bulk of traffic
    - Checkout: conversion
    - Contact form: occasional

    Back office (10%):
    - Order and message triage
    - Catalog maintenance: rare
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowsingJourney: 60,
        CheckoutJourney: 25,
        ContactJourney: 5,
        OrderTriageJourney: 8,
        CatalogMaintenanceJourney: 2,
    }
