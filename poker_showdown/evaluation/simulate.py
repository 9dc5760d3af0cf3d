"""
Repeated heads-up showdowns: win/loss/tie counts and hand-type frequencies.
"""

import logging
from dataclasses import dataclass, field

import numpy as np
from tqdm import tqdm

from poker_showdown.config import LOG_INTERVAL, REPORT_THRESHOLD
from poker_showdown.env.deck import make_rng
from poker_showdown.env.hand_type import HandCategory
from poker_showdown.env.showdown import Verdict, play_round

logger = logging.getLogger(__name__)


def parse_threshold(threshold):
    """HandCategory from a member, its name ('FULL_HOUSE') or its value."""
    if isinstance(threshold, HandCategory):
        return threshold
    if isinstance(threshold, str):
        key = threshold.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return HandCategory[key]
        except KeyError:
            names = ", ".join(c.name for c in HandCategory)
            raise ValueError(f"Unknown hand category {threshold!r} (choose from {names})") from None
    return HandCategory(threshold)


@dataclass
class SimulationStats:
    """Counts are from player A's side."""
    threshold: HandCategory = HandCategory[REPORT_THRESHOLD]
    rounds: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    notable: int = 0
    category_counts: np.ndarray = field(
        default_factory=lambda: np.zeros(len(HandCategory), dtype=np.int64)
    )

    def record(self, result):
        self.rounds += 1
        if result.verdict == Verdict.WIN:
            self.wins += 1
        elif result.verdict == Verdict.LOSS:
            self.losses += 1
        else:
            self.ties += 1
        category = result.type_a.category
        self.category_counts[category] += 1
        if category >= self.threshold:
            self.notable += 1

    @property
    def win_rate(self):
        return self.wins / self.rounds if self.rounds else 0.0

    @property
    def notable_rate(self):
        return self.notable / self.rounds if self.rounds else 0.0

    def category_frequencies(self):
        if not self.rounds:
            return np.zeros(len(HandCategory))
        return self.category_counts / self.rounds

    def summary(self):
        lines = [
            f"Rounds: {self.rounds}",
            f"{'Result':<10} {'Count':<10} {'Rate':<10}",
            "-" * 30,
        ]
        for name, count in (("Win", self.wins), ("Loss", self.losses), ("Tie", self.ties)):
            rate = count / self.rounds if self.rounds else 0.0
            lines.append(f"{name:<10} {count:<10} {rate:<10.4f}")
        lines.append("")
        lines.append(f"{'Hand (A)':<16} {'Count':<10} {'Freq':<10}")
        lines.append("-" * 36)
        freqs = self.category_frequencies()
        for category in HandCategory:
            label = category.name.replace("_", " ").title()
            lines.append(f"{label:<16} {int(self.category_counts[category]):<10} {freqs[category]:<10.4f}")
        threshold = self.threshold.name.replace("_", " ").title()
        lines.append("")
        lines.append(f"{threshold} or better: {self.notable} / {self.rounds}")
        return "\n".join(lines)


def simulate(num_rounds, seed=None, threshold=REPORT_THRESHOLD, progress=True, on_notable=None):
    """
    Play `num_rounds` independent rounds, each from a freshly shuffled deck.
    on_notable(result) is called for rounds where A holds `threshold` or better.
    """
    if num_rounds < 0:
        raise ValueError(f"num_rounds must be >= 0, got {num_rounds}")
    rng = make_rng(seed)
    stats = SimulationStats(threshold=parse_threshold(threshold))
    for i in tqdm(range(num_rounds), desc="Simulating...", disable=not progress):
        result = play_round(rng=rng)
        stats.record(result)
        if on_notable is not None and result.type_a.category >= stats.threshold:
            on_notable(result)
        if (i + 1) % LOG_INTERVAL == 0:
            logger.info("%d / %d notable after %d rounds", stats.notable, stats.rounds, i + 1)
    return stats
