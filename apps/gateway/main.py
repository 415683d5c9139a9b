# apps/gateway/main.py
from fastapi import FastAPI, HTTPException, Body
from fastapi.responses import FileResponse
from pydantic import BaseModel
from typing import Optional
from collections import OrderedDict
from pathlib import Path
import logging
from dotenv import load_dotenv

from capture.form import LandingForm
from capture.settings import settings, check_configuration

load_dotenv()  # picks up .env from the current working directory

log = logging.getLogger("ebook-landing")
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

def _mask(v: str, head: int = 24, tail: int = 6) -> str:
    if not v or len(v) <= head + tail:
        return v
    return f"{v[:head]}...{v[-tail:]}"

# ---------- Per-visitor forms (in-process, lost on restart) ----------
_FORMS: "OrderedDict[str, LandingForm]" = OrderedDict()

def _form_for(visitor_id: str) -> LandingForm:
    form = _FORMS.get(visitor_id)
    if form is None:
        form = LandingForm.create(settings, transport=app.state.transport)
        form.mount()
        _FORMS[visitor_id] = form
        # least recently used visitors go first
        while len(_FORMS) > settings.max_visitor_forms:
            evicted, _ = _FORMS.popitem(last=False)
            log.debug("evicted form for visitor %s", evicted)
    else:
        _FORMS.move_to_end(visitor_id)
    return form

def _state(form: LandingForm) -> dict:
    return {
        "status": form.state.value,
        "ui": form.ctx.view.state.model_dump(),
        "fields": form.ctx.fields.snapshot().model_dump(exclude={"honeypot"}),
        "downloads": [d.model_dump() for d in form.ctx.delivery.triggered],
    }

# ---------- Models ----------
class BlurRequest(BaseModel):
    field: str
    value: Optional[str] = ""

class SubmitRequest(BaseModel):
    name: Optional[str] = ""
    email: Optional[str] = ""
    honeypot: Optional[str] = ""

# ---------- App ----------
app = FastAPI(title="ebook-landing", version="0.1.0")
app.state.transport = None  # tests swap in an httpx.MockTransport

@app.on_event("startup")
def _print_cfg():
    log.info(
        "CFG webhook=%s reenable_ms=%s download_ms=%s ebook=%s",
        _mask(settings.webhook_url),
        settings.success_reenable_delay_ms,
        settings.download_delay_ms,
        settings.ebook_path,
    )
    check_configuration(settings)

@app.get("/health")
def health():
    return {
        "ok": True,
        "service": "ebook-landing",
        "webhook_configured": settings.webhook_configured,
    }

@app.post("/visitors/{visitor_id}/form:blur")
async def blur_field(visitor_id: str, req: BlurRequest = Body(...)):
    if req.field not in ("name", "email"):
        raise HTTPException(status_code=400, detail="Unknown field; use name|email")
    form = _form_for(visitor_id)
    form.type(req.field, req.value)
    await form.blur(req.field)
    return {"ok": True, **_state(form)}

@app.post("/visitors/{visitor_id}/form:focus")
async def focus_form(visitor_id: str):
    form = _form_for(visitor_id)
    await form.focus_in()
    return {"ok": True, **_state(form)}

@app.post("/visitors/{visitor_id}/form:submit")
async def submit_form(visitor_id: str, req: SubmitRequest = Body(...)):
    form = _form_for(visitor_id)
    # a disabled control takes no input either
    if form.ctx.view.state.submit_disabled:
        return {"ok": True, "dispatched": False, **_state(form)}

    form.type("name", req.name)
    form.type("email", req.email)
    form.type("honeypot", req.honeypot)
    dispatched = await form.submit()
    return {"ok": True, "dispatched": dispatched, **_state(form)}

@app.get("/visitors/{visitor_id}/form")
async def form_state(visitor_id: str):
    form = _FORMS.get(visitor_id)
    if form is None:
        raise HTTPException(status_code=404, detail=f"No form for visitor '{visitor_id}'")
    return {"ok": True, **_state(form)}

@app.get(settings.ebook_href)
def ebook():
    path = Path(settings.ebook_path)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Ebook file not found")
    return FileResponse(path, media_type="application/pdf", filename=settings.ebook_filename)

@app.get("/")
def landing_root():
    return {
        "service": "ebook-landing",
        "endpoints": {
            "health": "/health",
            "focus": "POST /visitors/{visitor_id}/form:focus",
            "blur": "POST /visitors/{visitor_id}/form:blur",
            "submit": "POST /visitors/{visitor_id}/form:submit",
            "state": "GET /visitors/{visitor_id}/form",
            "ebook": f"GET {settings.ebook_href}",
            "docs": "/docs",
        }
    }
