"""
Ship service module.

This module provides the ShipService class and the validation, rating and
filter helpers used by the ship catalog endpoints.
"""

from spaceport.services.ship.service import ShipService, ship_service

__all__ = ["ShipService", "ship_service"]
