
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import pandas as pd

from mathfn.registry import list_functions
from mathfn.dispatch import invoke, Failure, ErrorKind
from app.config import get_settings
from app.serialize import to_jsonable

settings = get_settings()

app = FastAPI(title=settings.APP_NAME)

# dispatch failures -> HTTP status
STATUS_FOR = {
    ErrorKind.INVALID_FUNCTION: 400,
    ErrorKind.RUNTIME_ERROR: 500,
}


def local_time(tz: str) -> str:
    # vi-VN locale layout, e.g. "14:05:09 19/10/2026"
    return pd.Timestamp.now(tz=tz).strftime("%H:%M:%S %d/%m/%Y")


@app.get("/health")
def health():
    return {"ok": True, "time": local_time(settings.TIMEZONE), "region": settings.REGION}


@app.get("/functions")
def functions():
    return {"functions": list_functions()}


@app.get("/math")
def math_endpoint(request: Request):
    # last value wins for a repeated key; keys keep first-seen order
    params = dict(request.query_params)
    func = params.pop("func", None)

    out = invoke(func, list(params.values()))
    if isinstance(out, Failure):
        return JSONResponse(status_code=STATUS_FOR[out.kind], content={"error": out.message})
    return {"func": func, "params": params, "result": to_jsonable(out.value)}
