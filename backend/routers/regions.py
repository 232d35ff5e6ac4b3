# routers/regions.py

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

import settings
from services.deps import get_store, get_templates
from services.errors import NotFoundError
from services.markup import link_list, nav_bar, text, url_component
from services.navigation import circular_neighbours
from services.templates import TemplateLoader, render
from services.vehicle_repository import VehicleStore

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get("", response_class=HTMLResponse)
def list_regions(
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    regions = store.distinct("Region")
    template = templates.load("regions.html")
    return render(template, {"$$$REGION_LIST$$$": link_list(regions, "/regions", settings.ESCAPE_HTML)})


@router.get("/{region}", response_class=HTMLResponse)
def vehicles_by_region(
    region: str,
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    rows = store.by_dimension("Region", region)
    if not rows:
        raise NotFoundError(f'Error: no data for region "{region}"')

    escape = settings.ESCAPE_HTML
    regions = store.distinct("Region")
    prev, nxt = circular_neighbours(regions, region)

    rows_html = ""
    for r in rows:
        rows_html += "<tr>"
        rows_html += f'<td>{text(r.get("Make"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Model"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Year"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Vehicle_Type"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Range"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Battery_Capacity"), escape)}</td>'
        rows_html += "</tr>"

    template = templates.load("region.html")
    return render(
        template,
        {
            "$$$REGION$$$": text(region, escape),
            "$$$REGION_ROWS$$$": rows_html,
            "$$$NAV_REGIONS$$$": nav_bar(regions, "/regions", escape),
            "$$$PREV_LINK$$$": f"/regions/{url_component(prev)}",
            "$$$NEXT_LINK$$$": f"/regions/{url_component(nxt)}",
        },
    )
