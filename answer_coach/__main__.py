#!/usr/bin/env python3
"""
Main entry point for the answer analysis core.
Allows running the package with: python -m answer_coach
"""
import json
import sys
import wave
from dataclasses import asdict
from typing import Dict, List, Optional

from .config import get_config
from .errors import ConfigurationError
from .analysis.orchestrator import build_orchestrator
from .infrastructure.audio.processing import read_wav_recording
from .models import AnalysisRequest, InterviewQuestion
from .utils import setup_logging

USAGE = """Usage: python -m answer_coach --transcript="..." [options]

  --transcript=TEXT        Transcribed answer
  --transcript-file=PATH   Read the transcript from a file
  --duration=SECONDS       Answer duration (taken from --wav when given)
  --confidence=0.0-1.0     Transcription confidence
  --question=TEXT          Question that was answered
  --type=TYPE              behavioral|technical|situational|case-study
  --difficulty=LEVEL       easy|medium|hard
  --wav=PATH               16-bit PCM recording for audio metrics
  --offline                Skip the remote model, heuristic report only
  --quick                  Print quick feedback instead of a full report
"""


def _parse_args(argv: List[str]) -> Dict[str, Optional[str]]:
    options: Dict[str, Optional[str]] = {}
    for arg in argv:
        if not arg.startswith("--"):
            raise ValueError(f"Unexpected argument: {arg}")
        key, sep, value = arg[2:].partition("=")
        options[key] = value if sep else None
    return options


def _float_option(options: Dict[str, Optional[str]], key: str, default: float) -> float:
    raw = options.get(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"--{key} must be a number, got {raw!r}")


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for the analysis orchestrator."""
    argv = sys.argv[1:] if argv is None else argv
    if "--help" in argv or "-h" in argv:
        print(USAGE)
        return 0

    try:
        config = get_config()
        options = _parse_args(argv)

        transcript = options.get("transcript") or ""
        if options.get("transcript-file"):
            with open(options["transcript-file"], "r", encoding="utf-8") as f:
                transcript = f.read().strip()

        duration = _float_option(options, "duration", 0.0)
        confidence = max(0.0, min(1.0, _float_option(options, "confidence", 1.0)))

        audio_size = levels = None
        if options.get("wav"):
            audio_size, duration, levels = read_wav_recording(options["wav"])
    except (ConfigurationError, ValueError, OSError, wave.Error) as e:
        print(f"❌ {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    setup_logging(config.log_file, config.log_level)
    orchestrator = build_orchestrator(config, offline="offline" in options)

    if "quick" in options:
        print(json.dumps(asdict(orchestrator.quick_feedback(transcript, duration)), indent=2))
        return 0

    question = InterviewQuestion(
        id="cli",
        question=options.get("question") or "Tell me about yourself.",
        type=options.get("type") or "behavioral",
        difficulty=options.get("difficulty") or "medium",
    )
    request = AnalysisRequest(
        transcript=transcript,
        question=question,
        audio_duration=duration,
        transcription_confidence=confidence,
        audio_size=audio_size,
        levels=levels,
    )
    report = orchestrator.process(request)
    print(json.dumps(report.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
