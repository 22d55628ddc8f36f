"""Shared fixtures: a small collected corpus on disk."""

import pytest

from voice_analyzer.config import Settings
from voice_analyzer.nlp import load_nlp


FIRST_ARTICLE = """---
title: Building My Rig
url: https://example.com/building-my-rig
date: 2024-03-02
word_count: 160
---

I've built three water-cooled rigs over the years. My rig runs hot in summer, so I keep the side panel off.

Before you buy anything, check the radiator clearance. The problem with small cases is the pump placement. The fix is a bracket that holds it under the drive cage, and it works.

Actually, the thermal pads matter more than people think. I tested four brands. The cheap ones dried out after a month (no surprise there).

Honestly? I'd recommend a bigger radiator whilst you're at it. In summary, my rig is quieter, cooler and easier to maintain than it was.
"""

SECOND_ARTICLE = """---
title: Pump Noise
url: https://example.com/pump-noise
date: 2024-04-10
word_count: 90
---

Right, let's sort out the pump noise. My pump hummed at 2400 rpm, which is loud.

However, a rubber mount fixed most of it. I think it might be the best ten pounds I've spent this year. Your mileage may vary.

Look, it isn't perfect. But my desk no longer buzzes, and that is good enough for me.
"""


@pytest.fixture
def corpus_root(tmp_path):
    """Directory of corpora holding one corpus, my-blog, with two articles."""
    articles = tmp_path / "my-blog" / "articles"
    articles.mkdir(parents=True)
    (articles / "building-my-rig.md").write_text(FIRST_ARTICLE, encoding="utf-8")
    (articles / "pump-noise.md").write_text(SECOND_ARTICLE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(corpus_root):
    return Settings(corpus_dir=corpus_root)


@pytest.fixture(scope="session")
def nlp():
    """The default spaCy pipeline, loaded once per test session."""
    return load_nlp()
