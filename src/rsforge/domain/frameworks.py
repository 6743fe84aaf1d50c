"""Framework template registry.

Templates are selected by exact, case-sensitive match on the framework
name. Anything unrecognized falls back to ``DEFAULT_TEMPLATE``. No values
are substituted into the text; it is written to ``src/main.rs`` verbatim.

``LISTED_FRAMEWORKS`` is what ``rsforge list`` prints. It is maintained by
hand alongside ``FRAMEWORK_TEMPLATES`` and nothing keeps the two in sync.
"""

from __future__ import annotations

from typing import NamedTuple

AXUM_TEMPLATE = """\
use axum::{routing::get, Router};

#[tokio::main]
async fn main() {
    let app = Router::new().route("/", get(|| async { "Hello from Axum!" }));
    let listener = tokio::net::TcpListener::bind("127.0.0.1:3000").await.unwrap();
    println!("Listening on http://127.0.0.1:3000");
    axum::serve(listener, app).await.unwrap();
}
"""

ACTIX_WEB_TEMPLATE = """\
use actix_web::{get, App, HttpServer, Responder, HttpResponse};

#[get("/")]
async fn index() -> impl Responder {
    HttpResponse::Ok().body("Hello from Actix-web!")
}

#[actix_web::main]
async fn main() -> std::io::Result<()> {
    println!("Listening on http://127.0.0.1:3000");
    HttpServer::new(|| App::new().service(index))
        .bind("127.0.0.1:3000")?
        .run()
        .await
}
"""

DEFAULT_TEMPLATE = """\
fn main() {
    println!("Hello, world!");
}
"""

FRAMEWORK_TEMPLATES: dict[str, str] = {
    "axum": AXUM_TEMPLATE,
    "actix-web": ACTIX_WEB_TEMPLATE,
}

LISTED_FRAMEWORKS: tuple[str, ...] = ("axum", "actix-web")

MODULE_DIRS: tuple[str, ...] = ("services", "models", "handlers", "routes")

ENTRY_POINT = "src/main.rs"


class ExtraDependency(NamedTuple):
    """A crate added alongside a recognized framework, with one feature flag."""

    crate: str
    features: str


ASYNC_RUNTIME_EXTRAS: tuple[ExtraDependency, ...] = (
    ExtraDependency("serde", "derive"),
    ExtraDependency("tokio", "full"),
)


def is_recognized(framework: str) -> bool:
    """Exact match against the known frameworks; no case folding."""
    return framework in FRAMEWORK_TEMPLATES


def template_name(framework: str) -> str:
    return framework if is_recognized(framework) else "default"


def template_for(framework: str) -> str:
    """Return the starter ``main.rs`` text for *framework*."""
    return FRAMEWORK_TEMPLATES.get(framework, DEFAULT_TEMPLATE)


def extra_dependencies(framework: str) -> tuple[ExtraDependency, ...]:
    """Crates added unconditionally for recognized frameworks, in order."""
    if is_recognized(framework):
        return ASYNC_RUNTIME_EXTRAS
    return ()
