from fastapi import Depends
from sqlalchemy.orm import Session

import settings
from db.deps import get_db
from services.templates import TemplateLoader
from services.vehicle_repository import VehicleStore


def get_store(db: Session = Depends(get_db)) -> VehicleStore:
    return VehicleStore(db)


def get_templates() -> TemplateLoader:
    return TemplateLoader(settings.TEMPLATE_DIR)
