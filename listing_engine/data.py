"""Bundled listing catalog used in static mode and as the initial collection."""
from __future__ import annotations

from typing import Tuple

from .models import Listing

LISTINGS: Tuple[Listing, ...] = (
    Listing(
        id=1,
        title="Modern 1-BR near Paradise Mall",
        district="Лозенец / Lozenets",
        price=980,
        beds=1,
        size=65,
        address="Lozenets, Sofia",
        tags=("Furnished", "Metro 5 min", "Balcony"),
    ),
    Listing(
        id=2,
        title="Sunny 2-BR with parking",
        district="Младост 1 / Mladost 1",
        price=1150,
        beds=2,
        size=88,
        address="Mladost 1, Sofia",
        tags=("Parking", "Elevator", "A/C"),
    ),
    Listing(
        id=3,
        title="Cozy studio for students",
        district="Студентски град / Studentski Grad",
        price=550,
        beds=0,
        size=38,
        address="Studentski Grad, Sofia",
        tags=("Budget", "Close to UNWE", "Wifi"),
    ),
    Listing(
        id=4,
        title="Designer 2-BR by Vitosha Blvd",
        district="Център / Center",
        price=1490,
        beds=2,
        size=92,
        address="Center, Sofia",
        tags=("Premium", "Walkable", "High ceilings"),
    ),
    Listing(
        id=5,
        title="Family 3-BR with yard",
        district="Бъкстон / Buxton",
        price=1650,
        beds=3,
        size=120,
        address="Buxton, Sofia",
        tags=("Yard", "Quiet street", "Pet-friendly"),
    ),
)
