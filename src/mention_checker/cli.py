import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .config import Settings
from .orchestrator import analyze_answer

app = typer.Typer(help="Mention / position / sentiment d'une marque dans une réponse LLM.")

logger = logging.getLogger(__name__)

def _setup_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

@app.command()
def analyze(
    answer_file: Path = typer.Argument(..., help="Fichier texte contenant la réponse du modèle"),
    brand: str = typer.Option(..., "--brand", "-b", help="Marque à chercher"),
    prompt: str = typer.Option("", "--prompt", "-p", help="Prompt d'origine (détecte les listes de recommandations)"),
):
    """Analyse hors-ligne d'une réponse déjà générée."""
    if not answer_file.exists():
        typer.echo(f"⚠️  Fichier introuvable : {answer_file}")
        raise typer.Exit(code=1)
    text = answer_file.read_text(encoding="utf-8")
    match, sentiment = analyze_answer(text, brand, prompt)
    out = {**match.model_dump(), "sentiment": sentiment.model_dump(mode="json")}
    typer.echo(json.dumps(out, ensure_ascii=False, indent=2))

@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interface d'écoute (HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (PORT, 4000 par défaut)"),
):
    """Lance l'API (uvicorn)."""
    import uvicorn
    from .server import create_app

    settings = Settings.from_env()
    _setup_logging(settings.LOG_LEVEL)
    api = create_app(settings)
    port = port or settings.PORT
    logger.info("Server running on port %s", port)
    uvicorn.run(api, host=host or settings.HOST, port=port, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    app()
