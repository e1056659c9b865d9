from fastapi import Response
from fastapi.responses import JSONResponse

# 브라우저 클라이언트가 직접 호출하므로 모든 응답에 동일하게 붙인다
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """{error: message} 형태의 오류 응답"""
    return JSONResponse(status_code=status_code, content={"error": message})


def preflight_response(body: str | None = None) -> Response:
    return Response(content=body, status_code=200, media_type="text/plain" if body else None)
