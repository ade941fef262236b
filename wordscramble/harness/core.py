"""
Simulation harness core primitives.

- run_case:  play one session (one root word) with a given player.
- run_batch: play many sessions in sequence (optionally a sample prefix).
- summarize: aggregate score statistics over a batch.

Each case gets its own GameSession backed by a single-word provider, so the
root is fixed by the caller while the real acceptance pipeline and the
configured dictionary oracle decide every outcome.

These functions are UI-agnostic so they can be reused by the CLI runners,
tests or a notebook.
"""

from __future__ import annotations

import time
from collections import Counter
from typing import Dict, Iterable, List, Tuple

import numpy as np

from wordscramble.config import GameConfig
from wordscramble.datasets.provider import StaticWordListProvider
from wordscramble.engine.session import GameSession
from wordscramble.errors import Accepted, Ignored
from wordscramble.oracles.base import BaseOracle

# Default number of submissions a player gets per session.
DEFAULT_MAX_SUBMISSIONS = 30


def run_case(
        player,
        root: str,
        *,
        oracle: BaseOracle,
        lexicon: Iterable[str],
        max_submissions: int = DEFAULT_MAX_SUBMISSIONS,
        config: GameConfig | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Play one session until the player gives up or the submission budget runs out.

    Args:
        player:          an object implementing BasePlayer with next_word(state)
        root:            the root word for this session
        oracle:          dictionary oracle the session validates against
        lexicon:         vocabulary handed to the player
        max_submissions: submission budget (> 0)
        config:          game config (language, min length)
        seed:            RNG seed for reproducible player choices

    Returns:
        dict with keys:
            root, score, submissions, accepted, ignored, rejected (reason -> count),
            used_words (newest first), history (list[(word, outcome)]), time_ms
    """
    if max_submissions <= 0:
        raise ValueError(f"max_submissions must be > 0; got {max_submissions}")

    session = GameSession(StaticWordListProvider([root]), oracle, config)
    root = session.start()

    player.reset(root=root, lexicon=list(lexicon), seed=seed,
                 min_length=session.config.min_length)

    history: List[Tuple[str, str]] = []
    rejected: Counter[str] = Counter()
    accepted = ignored = 0

    t0 = time.perf_counter()
    for turn in range(1, max_submissions + 1):
        state = {
            "turn": turn,
            "root": root,
            "history": list(history),
            "used_words": session.used_words,
            "score": session.score,
        }
        word = player.next_word(state)
        if word is None:
            break

        result = session.submit(word)
        history.append((result.word, result.outcome))
        if isinstance(result, Accepted):
            accepted += 1
        elif isinstance(result, Ignored):
            ignored += 1
        else:
            rejected[result.reason.value] += 1

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "root": root,
        "score": session.score,
        "submissions": len(history),
        "accepted": accepted,
        "ignored": ignored,
        "rejected": dict(rejected),
        "used_words": list(session.used_words),
        "history": history,
        "time_ms": dt,
    }


def run_batch(
        player,
        roots: List[str],
        *,
        oracle: BaseOracle,
        lexicon: List[str],
        max_submissions: int = DEFAULT_MAX_SUBMISSIONS,
        config: GameConfig | None = None,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many sessions back-to-back. If 'sample' is provided, only the first K
    roots are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but cases differ.
    """
    pool = list(roots)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, root in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(
            player, root, oracle=oracle, lexicon=lexicon,
            max_submissions=max_submissions, config=config, seed=case_seed,
        ))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Score statistics over a batch: count, mean, median, p90, max, plus the
    acceptance rate over all non-ignored submissions.
    """
    if not results:
        return {"sessions": 0, "mean": 0.0, "median": 0.0, "p90": 0.0, "max": 0,
                "acceptance_rate": 0.0}

    scores = np.array([r["score"] for r in results], dtype=float)
    accepted = sum(r["accepted"] for r in results)
    judged = sum(r["submissions"] - r["ignored"] for r in results)
    return {
        "sessions": len(results),
        "mean": round(float(scores.mean()), 3),
        "median": float(np.median(scores)),
        "p90": float(np.percentile(scores, 90)),
        "max": int(scores.max()),
        "acceptance_rate": round(accepted / judged, 4) if judged else 0.0,
    }
