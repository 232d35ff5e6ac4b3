# routers/vehicle.py

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

import settings
from services.deps import get_store, get_templates
from services.errors import NotFoundError
from services.markup import image_src, text
from services.templates import TemplateLoader, render
from services.vehicle_repository import VehicleStore

router = APIRouter(prefix="/vehicle", tags=["vehicle"])


@router.get("/{vehicle_id}", response_class=HTMLResponse)
def vehicle_detail(
    vehicle_id: str,
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    row = store.by_id(vehicle_id)
    if row is None:
        raise NotFoundError(f"Error: no vehicle with id {vehicle_id}")

    escape = settings.ESCAPE_HTML
    make, model = row.get("Make"), row.get("Model")

    def field(name: str) -> str:
        # 0, empty string and NULL all show as blank
        return text(row.get(name) or None, escape)

    template = templates.load("vehicle_detail.html")
    return render(
        template,
        {
            "$$$MAKE$$$": field("Make"),
            "$$$MODEL$$$": field("Model"),
            "$$$YEAR$$$": field("Year"),
            "$$$REGION$$$": field("Region"),
            "$$$TYPE$$$": field("Vehicle_Type"),
            "$$$RANGE$$$": field("Range"),
            "$$$BATTERY$$$": field("Battery_Capacity"),
            "$$$ENERGY$$$": field("Energy_Consumption"),
            "$$$CO2$$$": field("C02_Saved"),
            "$$$IMG_SRC$$$": image_src(make, model),
            "$$$IMG_ALT$$$": f"{text(make, escape)} {text(model, escape)}",
        },
    )
