"""Navigation API endpoints.

Provides rendered navigation for a page and the pagination order.
"""

from aiohttp import web

from navtree.app_keys import site_key


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/pages", get_pages),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    site = request.app[site_key]
    path = request.query.get("page")

    page = None
    if path:
        page = site.get_page(path)
        if page is None:
            return web.json_response(
                {"error": "Page not found", "path": path},
                status=404,
            )

    return web.json_response(site.render_navigation(page).to_dict())


async def get_pages(request: web.Request) -> web.Response:
    site = request.app[site_key]
    return web.json_response({"pages": site.page_order()})
