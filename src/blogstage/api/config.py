"""Config API endpoint."""

from aiohttp import web

from blogstage.app_keys import config_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    config = request.app[config_key]
    return web.json_response(
        {
            "blogs": [
                {
                    "key": blog.key,
                    "postUrl": blog.post_url,
                    "tagUrl": blog.tag_url,
                    "categoryUrl": blog.category_url,
                }
                for blog in config.blogs
            ],
        }
    )
