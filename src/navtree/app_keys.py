"""Application keys for type-safe app configuration access."""

from aiohttp import web

from navtree.core.site import Site

site_key = web.AppKey("site", Site)
