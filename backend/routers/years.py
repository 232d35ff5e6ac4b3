# routers/years.py

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

import settings
from services.deps import get_store, get_templates
from services.errors import NotFoundError
from services.markup import link_list, nav_bar, text, url_component
from services.navigation import circular_neighbours
from services.templates import TemplateLoader, render
from services.vehicle_repository import VehicleStore

router = APIRouter(prefix="/years", tags=["years"])


@router.get("", response_class=HTMLResponse)
def list_years(
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    years = store.distinct("Year")
    template = templates.load("years.html")
    return render(template, {"$$$YEAR_LIST$$$": link_list(years, "/years", settings.ESCAPE_HTML)})


@router.get("/{year}", response_class=HTMLResponse)
def vehicles_by_year(
    year: str,
    store: VehicleStore = Depends(get_store),
    templates: TemplateLoader = Depends(get_templates),
):
    # bound as text; the INTEGER column affinity does the conversion
    rows = store.by_dimension("Year", year)
    if not rows:
        raise NotFoundError(f'Error: no data for year "{year}"')

    escape = settings.ESCAPE_HTML
    years = store.distinct("Year")
    prev, nxt = circular_neighbours(years, year)

    rows_html = ""
    for r in rows:
        rows_html += "<tr>"
        rows_html += f'<td>{text(r.get("Make"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Model"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Vehicle_Type"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Region"), escape)}</td>'
        rows_html += f'<td>{text(r.get("Range"), escape)}</td>'
        rows_html += "</tr>"

    template = templates.load("year.html")
    return render(
        template,
        {
            "$$$YEAR$$$": text(year, escape),
            "$$$YEAR_ROWS$$$": rows_html,
            "$$$NAV_YEARS$$$": nav_bar(years, "/years", escape),
            "$$$PREV_LINK$$$": f"/years/{url_component(prev)}",
            "$$$NEXT_LINK$$$": f"/years/{url_component(nxt)}",
        },
    )
