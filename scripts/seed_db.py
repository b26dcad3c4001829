"""
Seed the two default partners.

Skips seeding when any partner already exists.

Usage:
    python scripts/seed_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from loguru import logger
from sqlmodel import Session

from app.db.session import engine
from app.models.partner import FitnessLevel, Sex, WeightUnit
from app.schemas.partner import PartnerCreate
from app.services.partner_service import PartnerService

PARTNERS = [
    PartnerCreate(name="Obed", color="blue", weekly_goal=5, calorie_goal=2200, age=28, height_cm=178, weight=181,
                  weight_unit=WeightUnit.LB, sex=Sex.MALE, fitness_level=FitnessLevel.INTERMEDIATE,
                  goal="muscle building", ),
    PartnerCreate(name="Kristina", color="pink", weekly_goal=4, calorie_goal=1900, age=26, height_cm=165, weight=137,
                  weight_unit=WeightUnit.LB, sex=Sex.FEMALE, fitness_level=FitnessLevel.INTERMEDIATE,
                  goal="toning and cardio", ),
]


def seed() -> None:
    with Session(engine) as session:
        service = PartnerService(session)
        if service.list_partners():
            logger.info("Database already seeded, skipping...")
            return

        logger.info("Seeding database...")
        for data in PARTNERS:
            service.create(data)
        logger.info("Database seeded successfully!")


if __name__ == "__main__":
    seed()
