from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pathlib import Path
import json
import os

app = FastAPI(title="Mock FX Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/fx_stub") if os.path.exists("/fx_stub") else Path(__file__).resolve().parent / "fx_stub"

DEFAULT_QUOTE = {
    "moneda": "USD",
    "casa": "oficial",
    "nombre": "Oficial",
    "compra": 1435,
    "venta": 1485,
    "fechaActualizacion": "2025-11-14T15:00:00.000Z",
}

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/v1/dolares/{casa}")
def get_quote(casa: str):
    file = DATA_DIR / f"quote_{casa}.json"
    if file.exists():
        return JSONResponse(content=json.loads(file.read_text()))
    if casa != "oficial":
        raise HTTPException(status_code=404, detail="quote not found")
    return JSONResponse(content=DEFAULT_QUOTE)
