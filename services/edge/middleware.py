from fastapi import Request
from fastapi.responses import Response

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",
}


async def cors(request: Request, call_next):
    """
    Answers every OPTIONS preflight with the fixed CORS headers, on any path,
    and stamps Access-Control-Allow-Origin on everything else.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=PREFLIGHT_HEADERS)

    response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = "*"
    return response
