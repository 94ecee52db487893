"""FastAPI REST API for tksq."""

from __future__ import annotations

import hashlib
import json
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

import redis.asyncio as aioredis
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from tksq import CompressionService, ConfigManager, __version__
from tksq.learning import default_store
from tksq.types import CompressionLevel, ContentType, TokenizerType


# ---------------------------------------------------------------------------
# Redis Cache
# ---------------------------------------------------------------------------

redis_client: aioredis.Redis | None = None

# Cache TTL in seconds (default: 1 hour)
CACHE_TTL = int(os.getenv("CACHE_TTL", "3600"))

# Redis connection URL
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379")


def _generate_cache_key(prefix: str, data: dict) -> str:
    """Generate a cache key from request data."""
    # Sort dict keys for consistent hashing
    sorted_data = json.dumps(data, sort_keys=True)
    hash_value = hashlib.sha256(sorted_data.encode()).hexdigest()[:16]
    return f"{prefix}:{hash_value}"


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

# Overrides the platform config directory, e.g. for containers.
CONFIG_DIR = os.getenv("TKSQ_CONFIG_DIR")

service = CompressionService(ConfigManager(CONFIG_DIR), default_store(CONFIG_DIR))


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------


class CompressRequest(BaseModel):
    """Request body for the /compress endpoint."""

    text: str = Field(..., description="Text to compress")
    level: CompressionLevel | None = Field(
        default=None, description="light, medium or aggressive (default from config)"
    )
    domain: str | None = Field(
        default=None, description="Dictionary domain: general, programming, legal, academic"
    )
    language: str | None = Field(
        default=None, description="auto, en or ru (default from config)"
    )
    tokenizer: TokenizerType | None = Field(default=None, description="Tokenizer for counting")
    preserve_patterns: list[str] | None = Field(
        default=None, description="Extra regex patterns for regions to keep verbatim"
    )
    content_type: ContentType | None = Field(
        default=None, description="auto, prose, code or structured"
    )
    stages: list[str] | None = Field(
        default=None, description="Explicit stage ids; overrides the level's stage list"
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "In order to get started, you basically need to install the package.",
                "level": "medium",
            }
        ]
    }}


class StageStatsResponse(BaseModel):
    stage: str
    tokens_in: int
    tokens_out: int
    reduction_percent: float
    time_ms: float


class ChangeResponse(BaseModel):
    original: str
    replacement: str
    position: int
    rule: str


class CandidateResponse(BaseModel):
    phrase: str
    suggested_replacement: str | None = None
    count: int
    first_seen: str
    last_seen: str


class CompressResponse(BaseModel):
    """Response body for the /compress endpoint."""

    text: str = Field(..., description="Compressed text")
    original_tokens: int
    compressed_tokens: int
    reduction_percent: float
    original_chars: int
    compressed_chars: int
    tokenizer: str
    level: str
    domain: str
    language: str
    stages: list[StageStatsResponse] = Field(default_factory=list)
    changes: list[ChangeResponse] = Field(default_factory=list)
    ready_suggestions: list[CandidateResponse] = Field(
        default_factory=list, description="Learned patterns ready to promote"
    )


class PackRequest(BaseModel):
    text: str = Field(..., description="Text to pack")
    level: CompressionLevel = Field(default="medium")
    language: str | None = Field(default=None)


class PackResponse(BaseModel):
    text: str = Field(..., description="Compressed text followed by a token summary line")


class CountRequest(BaseModel):
    text: str = Field(..., description="Text to count tokens for")
    tokenizer: TokenizerType | None = Field(default=None)


class CountResponse(BaseModel):
    tokens: int
    chars: int
    words: int
    lines: int
    tokenizer: str
    chars_per_token: float


class DiffRequest(BaseModel):
    original: str = Field(..., description="The original text")
    compressed: str | None = Field(
        default=None, description="Text to compare against; compressed from original if omitted"
    )
    level: CompressionLevel | None = Field(default=None)
    domain: str | None = Field(default=None)
    language: str | None = Field(default=None)


class DiffResponse(BaseModel):
    formatted: str = Field(..., description="Diff with [-removed-] and [+added+] markers")
    compressed: str
    words_removed: int
    words_added: int
    original_tokens: int | None = None
    compressed_tokens: int | None = None


class BenchmarkRequest(BaseModel):
    text: str = Field(..., description="Text to benchmark")
    domain: str | None = Field(default=None)
    language: str | None = Field(default=None)
    tokenizer: TokenizerType | None = Field(default=None)


class BenchmarkRowResponse(BaseModel):
    level: str
    tokens: int
    reduction_percent: float
    stages: list[str]


class BenchmarkResponse(BaseModel):
    original_tokens: int
    original_chars: int
    domain: str
    language: str
    tokenizer: str
    levels: list[BenchmarkRowResponse]
    aggressive_breakdown: list[StageStatsResponse]


class ConfigUpdateRequest(BaseModel):
    """Settings to change; omitted fields keep their current value."""

    level: CompressionLevel | None = None
    domain: str | None = None
    language: str | None = None
    tokenizer: TokenizerType | None = None
    content_type: ContentType | None = None
    preserve_patterns: list[str] | None = Field(
        default=None, description="Replaces the stored patterns"
    )
    custom_substitutions: dict[str, str] | None = Field(
        default=None, description="Merged into the stored substitutions"
    )
    learning: dict[str, bool | int] | None = Field(
        default=None, description="Merged into the stored learning settings"
    )


class PhraseRequest(BaseModel):
    phrase: str = Field(..., min_length=1)
    replacement: str | None = None


class PromoteResponse(BaseModel):
    phrase: str
    replacement: str


class RejectResponse(BaseModel):
    phrase: str
    removed: bool


class HealthResponse(BaseModel):
    """Response body for health check."""

    status: str = "ok"
    version: str
    cache_enabled: bool = False
    redis_connected: bool = False


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _stage_rows(breakdown) -> list[StageStatsResponse]:
    return [
        StageStatsResponse(
            stage=s.stage,
            tokens_in=s.tokens_in,
            tokens_out=s.tokens_out,
            reduction_percent=s.reduction_percent,
            time_ms=s.time_ms,
        )
        for s in breakdown
    ]


async def _cached(
    prefix: str,
    req: BaseModel,
    build: Callable[[], BaseModel],
    model: type[BaseModel],
) -> BaseModel:
    """Return a cached response for *req*, or build and cache one."""
    # Omitted request fields fall back to the config, so it is part of the key.
    cache_data = {"request": req.model_dump(), "config": service.config.model_dump()}
    cache_key = _generate_cache_key(prefix, cache_data)

    # Try cache first
    if redis_client:
        cached = await redis_client.get(cache_key)
        if cached:
            return model(**json.loads(cached))

    response = build()

    # Store in cache
    if redis_client:
        await redis_client.setex(cache_key, CACHE_TTL, response.model_dump_json())

    return response


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - Redis connection and learned-data flush."""
    global redis_client
    try:
        redis_client = await aioredis.from_url(
            REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
        )
        await redis_client.ping()
        print(f"✓ Connected to Redis at {REDIS_URL}")
    except Exception as e:
        print(f"⚠ Redis unavailable: {e}. Caching disabled.")
        redis_client = None

    yield

    service.store.flush()
    if redis_client:
        await redis_client.close()


app = FastAPI(
    title="tksq API",
    description=(
        "REST API for compressing text before it is sent to a language model. "
        "Removes fillers, substitutes wordy phrases and normalizes whitespace "
        "while keeping code blocks, inline code and URLs intact."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Check API health, version, and cache status."""
    redis_connected = False
    if redis_client:
        try:
            await redis_client.ping()
            redis_connected = True
        except Exception:
            redis_connected = False

    return HealthResponse(
        status="ok",
        version=__version__,
        cache_enabled=redis_client is not None,
        redis_connected=redis_connected,
    )


@app.post("/compress", response_model=CompressResponse, tags=["Compression"])
async def compress_text(req: CompressRequest) -> CompressResponse:
    """Compress text and report token statistics.

    Also feeds the learning store, so results are never cached.
    """
    try:
        outcome = service.compress(
            req.text,
            level=req.level,
            domain=req.domain,
            language=req.language,
            tokenizer=req.tokenizer,
            preserve_patterns=req.preserve_patterns,
            content_type=req.content_type,
            stages=req.stages,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    result = outcome.result
    stats = result.stats
    return CompressResponse(
        text=result.compressed,
        original_tokens=stats.original_tokens,
        compressed_tokens=stats.compressed_tokens,
        reduction_percent=stats.reduction_percent,
        original_chars=stats.original_chars,
        compressed_chars=stats.compressed_chars,
        tokenizer=stats.tokenizer,
        level=outcome.level,
        domain=outcome.domain,
        language=outcome.language,
        stages=_stage_rows(stats.stage_breakdown),
        changes=[
            ChangeResponse(
                original=c.original,
                replacement=c.replacement,
                position=c.position,
                rule=c.rule,
            )
            for c in result.changes
        ],
        ready_suggestions=[CandidateResponse(**c.model_dump()) for c in outcome.ready_suggestions],
    )


@app.post("/pack", response_model=PackResponse, tags=["Compression"])
async def pack_text(req: PackRequest) -> PackResponse:
    """Compress text and append a one-line token summary."""
    try:
        return PackResponse(text=service.pack(req.text, level=req.level, language=req.language))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.post("/count", response_model=CountResponse, tags=["Analysis"])
async def count_tokens(req: CountRequest) -> CountResponse:
    """Count tokens, characters, words and lines.

    Results are cached in Redis for improved performance.
    """

    def build() -> CountResponse:
        result = service.count(req.text, tokenizer=req.tokenizer)
        return CountResponse(
            tokens=result.tokens,
            chars=result.chars,
            words=result.words,
            lines=result.lines,
            tokenizer=result.tokenizer,
            chars_per_token=result.chars_per_token,
        )

    try:
        return await _cached("count", req, build, CountResponse)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.post("/diff", response_model=DiffResponse, tags=["Analysis"])
async def diff_text(req: DiffRequest) -> DiffResponse:
    """Word-level diff between original and compressed text."""
    try:
        report = service.diff(
            req.original,
            req.compressed,
            level=req.level,
            domain=req.domain,
            language=req.language,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return DiffResponse(
        formatted=report.diff.formatted,
        compressed=report.compressed,
        words_removed=report.diff.removed_count,
        words_added=report.diff.added_count,
        original_tokens=report.original_tokens,
        compressed_tokens=report.compressed_tokens,
    )


@app.post("/benchmark", response_model=BenchmarkResponse, tags=["Analysis"])
async def benchmark_text(req: BenchmarkRequest) -> BenchmarkResponse:
    """Compress text at every level and compare the reductions.

    Results are cached in Redis for improved performance.
    """

    def build() -> BenchmarkResponse:
        report = service.benchmark(
            req.text, domain=req.domain, language=req.language, tokenizer=req.tokenizer
        )
        return BenchmarkResponse(
            original_tokens=report.original_tokens,
            original_chars=report.original_chars,
            domain=report.domain,
            language=report.language,
            tokenizer=report.tokenizer,
            levels=[
                BenchmarkRowResponse(
                    level=row.level,
                    tokens=row.tokens,
                    reduction_percent=row.reduction_percent,
                    stages=list(row.stages),
                )
                for row in report.rows
            ],
            aggressive_breakdown=_stage_rows(report.aggressive_breakdown),
        )

    try:
        return await _cached("benchmark", req, build, BenchmarkResponse)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.get("/config", tags=["Config"])
async def get_config() -> dict:
    """Current configuration, plus where it and the learned data live."""
    return {
        **service.config.model_dump(),
        "config_path": str(service.config_manager.config_path()),
        "promoted": len(service.store.get_promoted()),
    }


@app.post("/config", tags=["Config"])
async def update_config(req: ConfigUpdateRequest) -> dict:
    """Update and persist configuration settings."""
    try:
        updated = service.update_config(**req.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return updated.model_dump()


@app.get("/learn/candidates", response_model=list[CandidateResponse], tags=["Learning"])
async def learn_candidates() -> list[CandidateResponse]:
    """Candidate patterns discovered from compressed text, most frequent first."""
    return [CandidateResponse(**c.model_dump()) for c in service.learn_candidates()]


@app.post("/learn/promote", response_model=PromoteResponse, tags=["Learning"])
async def learn_promote(req: PhraseRequest) -> PromoteResponse:
    """Activate a candidate as a substitution."""
    try:
        replacement = service.learn_promote(req.phrase, req.replacement)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PromoteResponse(phrase=req.phrase, replacement=replacement)


@app.post("/learn/reject", response_model=RejectResponse, tags=["Learning"])
async def learn_reject(req: PhraseRequest) -> RejectResponse:
    """Drop a candidate pattern."""
    return RejectResponse(phrase=req.phrase, removed=service.learn_reject(req.phrase))


@app.post("/learn/add", response_model=PromoteResponse, tags=["Learning"])
async def learn_add(req: PhraseRequest) -> PromoteResponse:
    """Add a manual substitution straight to the promoted set."""
    try:
        service.learn_add(req.phrase, req.replacement or "")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PromoteResponse(phrase=req.phrase, replacement=req.replacement)


@app.post("/learn/reset", tags=["Learning"])
async def learn_reset() -> dict:
    """Clear every candidate, promoted pattern and statistic."""
    service.learn_reset()
    return {"status": "reset"}


@app.get("/learn/stats", tags=["Learning"])
async def learn_stats() -> dict:
    """All-time compression statistics."""
    return service.learn_stats()


@app.get("/dashboard", tags=["Learning"])
async def dashboard() -> dict:
    """Stats, configuration, learning buffer and dictionary sizes in one view."""
    return service.dashboard()
