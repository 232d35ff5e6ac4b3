# routers/types.py

import json

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

import settings
from services.chart import range_by_year
from services.deps import get_store, get_templates
from services.errors import NotFoundError
from services.markup import image_src, js_number, link_list, nav_bar, text, url_component
from services.navigation import circular_neighbours
from services.templates import TemplateLoader, render
from services.vehicle_repository import VehicleStore

router = APIRouter(tags=["vehicle-types"])


def _vehicle_row(r: dict, escape: bool) -> str:
    make, model = r.get("Make"), r.get("Model")
    return (
        "<tr>"
        f'<td><a href="/vehicle/{r.get("rowid")}">{text(make, escape)}</a></td>'
        f"<td>{text(model, escape)}</td>"
        f'<td>{text(r.get("Year"), escape)}</td>'
        f'<td><a href="/regions/{url_component(r.get("Region"))}">{text(r.get("Region"), escape)}</a></td>'
        f'<td>{text(r.get("Range"), escape)}</td>'
        f'<td>{text(r.get("Battery_Capacity"), escape)}</td>'
        f'<td>{text(r.get("Energy_Consumption"), escape)}</td>'
        f'<td>{text(r.get("C02_Saved"), escape)}</td>'
        f'<td><img src="{image_src(make, model)}" alt="{text(make, escape)} {text(model, escape)}" '
        "onerror=\"this.style.display='none'\"/></td>"
        "</tr>"
    )


@router.get("/", response_class=HTMLResponse)
def home(
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    types = store.distinct("Vehicle_Type")
    template = templates.load("index.html")
    return render(template, {"$$$TYPE_LIST$$$": link_list(types, "/vehicles", settings.ESCAPE_HTML)})


@router.get("/types", response_class=HTMLResponse)
def list_types(
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    types = store.distinct("Vehicle_Type")
    template = templates.load("types.html")
    return render(template, {"$$$TYPE_LIST$$$": link_list(types, "/vehicles", settings.ESCAPE_HTML)})


@router.get("/vehicles/{vehicle_type}", response_class=HTMLResponse)
def vehicles_by_type(
    vehicle_type: str,
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    rows = store.by_dimension("Vehicle_Type", vehicle_type)
    if not rows:
        raise NotFoundError(f'Error: no data for vehicle type "{vehicle_type}"')

    escape = settings.ESCAPE_HTML
    types = store.distinct("Vehicle_Type")
    prev, nxt = circular_neighbours(types, vehicle_type)
    series = range_by_year(rows)

    template = templates.load("vehicles.html")
    return render(
        template,
        {
            "$$$VEHICLE_TYPE$$$": text(vehicle_type, escape),
            "$$$VEHICLE_ROWS$$$": "".join(_vehicle_row(r, escape) for r in rows),
            "$$$NAV_TYPES$$$": nav_bar(types, "/vehicles", escape),
            "$$$PREV_LINK$$$": f"/vehicles/{url_component(prev)}",
            "$$$NEXT_LINK$$$": f"/vehicles/{url_component(nxt)}",
            "$$$CHART_LABELS$$$": json.dumps(series.labels, separators=(",", ":")),
            "$$$CHART_DATA$$$": json.dumps([js_number(v) for v in series.data], separators=(",", ":")),
        },
    )
