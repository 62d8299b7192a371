# server.py
import os, base64, binascii
from typing import Optional

from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from vigshuffle import encode, decode, CipherError, MODULUS, __version__
from vigshuffle.files import encoded_path, decoded_path

from dotenv import load_dotenv
load_dotenv()

DEFAULT_MAX_PAYLOAD = 10 * 1024 * 1024

def _max_payload(default=DEFAULT_MAX_PAYLOAD):
    try: return int(os.getenv("MAX_PAYLOAD_BYTES", default))
    except ValueError: return default

MAX_PAYLOAD_BYTES = _max_payload()
print(f"vigshuffle server: payload limit {MAX_PAYLOAD_BYTES} bytes")

app = FastAPI(title="vigshuffle", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)

# --- Schemas ---
class TransformReq(BaseModel):
    text: Optional[str] = Field(None, description="7-bit ASCII text")
    payload_b64: Optional[str] = Field(None, description="base64 of 7-bit bytes")
    key1: str
    key2: Optional[str] = Field(None, description="omit to use the default second key")

class TransformResp(BaseModel):
    length: int
    text: str
    payload_b64: str

# --- Helpers ---
def _payload(body: TransformReq) -> bytes:
    if (body.text is None) == (body.payload_b64 is None):
        raise HTTPException(400, "give exactly one of text or payload_b64")
    if body.text is not None:
        try:
            data = body.text.encode("ascii")
        except UnicodeEncodeError:
            raise HTTPException(400, "text must be 7-bit ASCII")
    else:
        try:
            data = base64.b64decode(body.payload_b64, validate=True)
        except (binascii.Error, ValueError):
            raise HTTPException(400, "payload_b64 is not valid base64")
    _check_size(len(data))
    return data

def _check_size(n: int):
    if n > MAX_PAYLOAD_BYTES:
        raise HTTPException(413, f"payload larger than {MAX_PAYLOAD_BYTES} bytes")

def _run(fn, data: bytes, key1: str, key2: Optional[str]) -> bytes:
    try:
        return fn(data, key1, key2)
    except CipherError as e:
        raise HTTPException(400, str(e))

def _resp(out: bytes) -> TransformResp:
    return TransformResp(length=len(out), text=out.decode("ascii"),
                         payload_b64=base64.b64encode(out).decode())

def _attachment(out: bytes, filename: str) -> Response:
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=out, media_type="application/octet-stream", headers=headers)

def _read_upload(file: UploadFile) -> bytes:
    data = file.file.read(MAX_PAYLOAD_BYTES + 1)
    _check_size(len(data))
    return data

# --- Routes ---
@app.get("/health")
def health():
    return {"ok": True, "modulus": MODULUS}

@app.post("/api/encode", response_model=TransformResp)
def api_encode(body: TransformReq):
    return _resp(_run(encode, _payload(body), body.key1, body.key2))

@app.post("/api/decode", response_model=TransformResp)
def api_decode(body: TransformReq):
    return _resp(_run(decode, _payload(body), body.key1, body.key2))

@app.post("/api/encode-file")
def api_encode_file(key1: Optional[str] = Form(None),
                    key2: Optional[str] = Form(None),
                    file: UploadFile = File(...)):
    out = _run(encode, _read_upload(file), key1 or "", key2)
    return _attachment(out, encoded_path(file.filename or "upload"))

@app.post("/api/decode-file")
def api_decode_file(key1: Optional[str] = Form(None),
                    key2: Optional[str] = Form(None),
                    file: UploadFile = File(...)):
    out = _run(decode, _read_upload(file), key1 or "", key2)
    return _attachment(out, decoded_path(file.filename or "upload.enc"))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("VIGSHUFFLE_HOST", "0.0.0.0"),
                port=int(os.getenv("VIGSHUFFLE_PORT", "8000")))
