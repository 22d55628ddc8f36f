"""Tests for specificity, vocabulary tiers, phrase library, argument flow, transitions and expression markers."""

import pytest
from spacy.tokens import Doc
from spacy.vocab import Vocab

from voice_analyzer.analyzers import (
    argument_flow,
    expression_markers,
    paragraph_transitions,
    phrase_library,
    specificity,
    vocabulary_tiers,
)
from voice_analyzer.analyzers.argument_flow import ARGUMENT_PATTERNS, clean_markdown, confidence, detect_pattern
from voice_analyzer.analyzers.expression_markers import fragment_risk, is_fragment
from voice_analyzer.analyzers.paragraph_transitions import (
    classify_paragraph,
    detect_transitions,
    linking_device,
    linking_phrase,
)


OWNED_RIG = "I own a 3090. My rig runs hot. The thermal pads help. I wish I'd known sooner."


class TestSpecificity:
    """Test possessive versus generic references."""

    def test_owned_rig(self):
        report = specificity.analyze(OWNED_RIG)
        assert "my rig" in [p.pattern.lower() for p in report.possessive_patterns]
        assert "the thermal" in [p.pattern.lower() for p in report.generic_patterns]
        assert report.specificity_ratio == pytest.approx(0.5)

    def test_third_person_possessive(self):
        patterns, _ = specificity.possessive_patterns("Sarah's wheel is great.")
        assert [p.pattern for p in patterns] == ["Sarah's wheel"]
        assert patterns[0].category == "possessive"

    def test_demonstrative(self):
        patterns, _ = specificity.possessive_patterns("I think this card works.")
        assert [(p.pattern, p.category) for p in patterns] == [("this card", "demonstrative")]

    def test_bare_plurals(self):
        patterns = specificity.generic_patterns("Cables matter. Pedals wear out.")
        assert sorted(p.pattern for p in patterns) == ["Cables", "Pedals"]
        assert {p.category for p in patterns} == {"bare_plural"}

    def test_short_nouns_skipped(self):
        patterns, _ = specificity.possessive_patterns("my ox is big.")
        assert patterns == []

    def test_dominant_nouns_merge_case(self):
        report = specificity.analyze("My rig. my rig.")
        assert [(n.noun, n.count) for n in report.dominant_nouns] == [("rig", 2)]
        assert "**Dominant topics:** rig" in report.guidance

    def test_context(self):
        assert specificity.context("abcdef", 3, width=2) == "...bcde..."

    def test_no_generic_references(self):
        report = specificity.analyze("My rig runs hot.")
        assert report.specificity_ratio == 0.0
        assert report.interpretation.startswith("Very low specificity")

    @pytest.mark.parametrize(
        "ratio, prefix",
        [
            (0.5, "High specificity"),
            (0.3, "Moderate specificity"),
            (0.2, "Low specificity"),
            (0.1, "Very low specificity"),
        ],
    )
    def test_interpretation(self, ratio, prefix):
        assert specificity.interpret(ratio).startswith(prefix)


class TestVocabularyTiers:
    """Test formal vocabulary and slop detection."""

    def test_casual_text(self):
        report = vocabulary_tiers.analyze(OWNED_RIG)
        assert report.ai_slop == []
        assert report.formal_verbs == []
        assert report.formality_score == 0

    def test_inflections(self):
        assert vocabulary_tiers.inflections("utilize") >= {"utilizes", "utilized", "utilizing"}
        assert vocabulary_tiers.inflections("select") == {"select", "selects", "selected", "selecting"}

    def test_formal_and_slop(self):
        report = vocabulary_tiers.analyze(
            "We utilize robust tools and utilized them to delve deeper. Leverage it."
        )
        assert [(t.word, t.count) for t in report.formal_verbs] == [("utilize", 2)]
        assert sorted(t.word for t in report.ai_slop) == ["delve", "leverage", "robust"]
        assert report.total_words == 12
        assert report.total_formal_words == 2
        assert report.formality_score == 167
        assert report.recommendations[0] == "CRITICAL: Found 3 AI slop words. These MUST be removed."
        assert 'Most used formal verbs: "utilize" (2×)' in report.recommendations

    def test_formality_half_rounds_up(self):
        # 1 formal word in 16 is exactly 62.5 per 1000
        report = vocabulary_tiers.analyze("utilize " + "word " * 15)
        assert report.formality_score == 63

    def test_formality_band_at_half(self):
        report = vocabulary_tiers.analyze("utilize " * 41 + "word " * 1959)
        assert report.total_words == 2000
        assert report.formality_score == 21
        assert any(r.startswith("HIGH FORMALITY: 21") for r in report.recommendations)

    def test_hyphenated_slop(self):
        report = vocabulary_tiers.analyze("A cutting-edge design.")
        assert [t.word for t in report.ai_slop] == ["cutting-edge"]

    def test_alternatives(self):
        report = vocabulary_tiers.analyze("We utilize it.")
        assert report.formal_verbs[0].suggested_alternatives == ["use"]


class TestPhraseLibrary:
    """Test phrase extraction for imitation."""

    def test_opening_patterns(self):
        text = "\n\n".join([
            "I've built three rigs over time.",
            "Right, let us start with the basics.",
            "Before you begin anything here.",
            "Short. This paragraph is plain enough.",
        ])
        openings = phrase_library.opening_patterns(text)
        assert [p.phrase for p in openings.personal_story] == ["I've built three rigs over time"]
        assert [p.phrase for p in openings.direct_action] == ["Right, let us start with the basics"]
        assert [p.phrase for p in openings.protective_warning] == ["Before you begin anything here"]

    def test_transition_phrases(self):
        phrases = phrase_library.transition_phrases(
            "However, this works fine. Actually the key part is cooling, mostly."
        )
        assert [p.phrase for p in phrases] == ["However", "Actually the key part is cooling"]

    def test_equipment_references(self):
        refs = phrase_library.equipment_references("My rig runs hot. my  RIG again. The card is fine.")
        assert [(p.phrase, p.count) for p in refs.with_possessive] == [("my rig", 2)]
        assert [(p.phrase, p.count) for p in refs.generic] == [("the card", 1)]

    def test_caveats(self):
        caveats = phrase_library.caveat_phrases(
            "It isn't perfect for everyone here. Your mileage may vary, I wish it was cheaper."
        )
        assert len(caveats) == 2

    def test_total(self):
        report = phrase_library.analyze("My rig runs hot. The card is fine.")
        assert report.total_phrases == (
            len(report.opening_patterns.personal_story)
            + len(report.opening_patterns.direct_action)
            + len(report.opening_patterns.protective_warning)
            + len(report.transition_phrases)
            + len(report.equipment_references.with_possessive)
            + len(report.equipment_references.generic)
            + len(report.caveat_phrases)
        )


class TestArgumentFlow:
    """Test argument patterns, devices and moves."""

    WARNING = (
        "Watch out before you buy a cheap pump for this build. For example, mine failed "
        "after 3 weeks of use. You should buy the better one instead of saving money."
    )
    OPENING = (
        "Okay, let's get this build started today. We need a pump, a radiator and a "
        "reservoir, plus fittings and tubing to join them all."
    )
    CLOSING = (
        "In summary, the quiet pump wins on every count that matters to me. "
        "I'd recommend it to anyone building a small loop."
    )

    @pytest.mark.parametrize(
        "strong, total, expected",
        [
            (0, 0, ("low", 0.0)),
            (7, 10, ("high", 0.7)),
            (4, 10, ("medium", 0.4)),
            (3, 10, ("low", 0.3)),
        ],
    )
    def test_confidence(self, strong, total, expected):
        label, score = confidence(strong, total)
        assert (label, score) == (expected[0], pytest.approx(expected[1]))

    def test_strong_warning(self):
        pattern = detect_pattern(ARGUMENT_PATTERNS[0], [self.WARNING])
        assert pattern.frequency == 1
        assert pattern.confidence == "high"
        assert pattern.examples[0].components.opening == "Watch out before you buy a cheap pump for this build"

    def test_weak_warning(self):
        paragraph = "Be careful with cheap pumps on any build. They tend to fail sooner than the good ones."
        pattern = detect_pattern(ARGUMENT_PATTERNS[0], [paragraph])
        assert pattern.frequency == 1
        assert (pattern.confidence, pattern.confidence_score) == ("low", 0.0)

    def test_claim_evidence(self):
        paragraph = (
            "In my experience the stock cooler is far too loud under load. "
            "I ran it for a month in a small case. So I swapped it for a quieter model."
        )
        pattern = detect_pattern(ARGUMENT_PATTERNS[1], [paragraph])
        assert pattern.confidence == "high"
        components = pattern.examples[0].components
        assert components.claim == "In my experience the stock cooler is far too loud under load"
        assert components.evidence == "I ran it for a month in a small case"
        assert components.conclusion == "So I swapped it for a quieter model"

    def test_specification_without_benefit_or_defense(self):
        paragraph = (
            "I picked the Simucube Sport for this build and it sat on the desk for a long time "
            "while I sorted out the mounting plate, the cabling, the pedals and the rest of the "
            "cockpit, one piece at a time over several weekends of tinkering in the garage."
        )
        pattern = detect_pattern(ARGUMENT_PATTERNS[3], [paragraph])
        assert pattern.frequency == 1
        assert (pattern.confidence, pattern.confidence_score) == ("low", 0.0)
        assert pattern.examples[0].components.claim == "Simucube Sport"

    def test_unmatched_patterns_are_dropped(self):
        report = argument_flow.analyze(self.WARNING)
        assert [p.pattern for p in report.patterns] == [ARGUMENT_PATTERNS[0].title]

    def test_conversational_devices(self):
        devices = argument_flow.conversational_devices("Actually, it works. Look, this matters. Well, fine.")
        assert [d.trigger for d in devices] == ["actually", "look", "well"]
        look = devices[1]
        assert look.type == "reader_alignment"
        assert look.examples == ["Actually, it works. Look, this matters."]

    def test_clean_markdown(self):
        assert clean_markdown("## Title\n**Bold** and [link](http://x.com) with `code`") == (
            "Title Bold and link with code"
        )

    def test_moves(self):
        report = argument_flow.analyze(f"{self.OPENING}\n\n{self.CLOSING}")
        assert [m.type for m in report.opening_moves] == ["Direct Action"]
        assert [m.type for m in report.closing_moves] == ["Summary", "Personal Recommendation"]

    def test_short_paragraphs_ignored(self):
        assert argument_flow.substantial_paragraphs("Too short.\n\n" + self.OPENING) == [self.OPENING]


class TestParagraphTransitions:
    """Test paragraph typing and hand-overs."""

    @pytest.mark.parametrize(
        "paragraph, expected",
        [
            ("Before you start, my advice is to check it.", "warning"),
            ("I've tested this model for weeks.", "personal"),
            ("For example, the model is fine.", "example"),
            ("It runs at 240 fps at best.", "technical"),
            ("It just works.", "explanation"),
        ],
    )
    def test_classify_paragraph(self, paragraph, expected):
        assert classify_paragraph(paragraph) == expected

    @pytest.mark.parametrize(
        "paragraph, expected",
        [
            ("And also it rained.", "additive"),
            ("Still, why bother?", "contrast"),
            ("So we left.", "causal"),
            ("Then we left.", "temporal"),
            ("For example, this.", "example"),
            ("Is it done? Yes.", "question"),
            ("Look, it works.", "conversational_restart"),
            ("It works.", "implicit"),
        ],
    )
    def test_linking_device(self, paragraph, expected):
        assert linking_device(paragraph) == expected

    def test_linking_phrase(self):
        assert linking_phrase("Look, this matters a lot.", "conversational_restart") == "Look,"
        assert linking_phrase("However the fan is loud.", "contrast") == "However the fan"
        assert linking_phrase("It works.", "implicit") is None

    def test_grouped_and_sorted(self):
        transitions = detect_transitions(
            ["My rig is here.", "But it is loud.", "But it is cheap.", "But it is small."]
        )
        assert [(t.from_type, t.to_type, t.frequency) for t in transitions] == [
            ("explanation", "explanation", 2),
            ("personal", "explanation", 1),
        ]
        first = transitions[0]
        assert first.linking_device == "contrast"
        assert first.linking_phrase == "But it is"
        assert first.examples[0].transition_sentence == "But it is cheap"

    def test_problem_solution_shift(self):
        shifts = paragraph_transitions.topic_shift_patterns([
            "The problem with this pump is the noise it makes.",
            "The fix is a simple rubber mount under it.",
        ])
        assert [s.pattern for s in shifts] == ["Problem → Solution Chain"]
        example = shifts[0].examples[0]
        assert example.startswith("PROBLEM: The problem")
        assert "→ SOLUTION: The fix" in example

    def test_zoom_out_shift(self):
        shifts = paragraph_transitions.topic_shift_patterns([
            "It pulls 450 watts under full load.",
            "In practice this means a bigger supply.",
        ])
        assert [s.pattern for s in shifts] == ["Zoom Out (Specific → General)"]

    def test_energy_shift(self):
        shifts = paragraph_transitions.energy_shifts([
            "This card is great!",
            "The specifications list a 450 watt limit.",
        ])
        assert [(s.from_state, s.to_state) for s in shifts] == [("High Energy (Enthusiasm)", "Technical Detail")]

    def test_short_paragraphs_ignored(self):
        report = paragraph_transitions.analyze("My rig is here.\n\nBut it is loud.")
        assert report.transitions == []


def tagged(pos_by_sentence: dict[str, str]):
    """A pipeline that tags each known sentence with fixed part-of-speech labels."""
    vocab = Vocab()

    def nlp(sentence):
        return Doc(vocab, words=sentence.split(), pos=pos_by_sentence[sentence].split())

    return nlp


def untagged(sentence):
    raise AssertionError(f"tagger called for {sentence!r}")


TAGS = {
    "The pump in the corner of my case": "DET NOUN ADP DET NOUN ADP PRON NOUN",
    "The pump hums quietly all day long": "DET NOUN VERB ADV DET NOUN ADV",
    "It has been a long week": "PRON AUX AUX DET ADJ NOUN",
}


class TestExpressionMarkers:
    """Test fragments, questions, asides and informal markers."""

    @pytest.mark.parametrize(
        "sentence, expected",
        [
            ("The pump in the corner of my case", True),
            ("The pump hums quietly all day long", False),
            ("It has been a long week", False),
        ],
    )
    def test_is_fragment(self, sentence, expected):
        assert is_fragment(sentence, tagged(TAGS)) is expected

    def test_short_sentences_skip_tagging(self):
        assert is_fragment("Great stuff", untagged) is True

    def test_fragments(self):
        found = expression_markers.fragments(
            ["Great stuff.", "The pump hums quietly all day long."], tagged(TAGS),
        )
        assert found.count == 1
        assert found.rate == pytest.approx(50.0)
        assert found.examples == ["Great stuff"]
        assert found.detection_risk == "safe"

    def test_present_tense_verbs_are_not_fragments(self, nlp):
        report = expression_markers.analyze(
            "The dog chased the mailman every single morning. "
            "My neighbour sings loudly in the shower most evenings.",
            nlp,
        )
        assert report.fragments.count == 0

    def test_verbless_sentence_is_fragment(self, nlp):
        report = expression_markers.analyze(
            "Absolutely brilliant value for the money. I bought two of them.", nlp,
        )
        assert report.fragments.examples == ["Absolutely brilliant value for the money"]

    @pytest.mark.parametrize("rate, risk", [(0.5, "high"), (1.0, "moderate"), (2.5, "safe")])
    def test_fragment_risk(self, rate, risk):
        assert fragment_risk(rate) == risk

    def test_rhetorical_questions(self):
        questions = expression_markers.rhetorical_questions(["Why bother?", "It works."], 10)
        assert questions.count == 1
        assert questions.rate == pytest.approx(100.0)
        assert questions.examples == ["Why bother?"]

    def test_asides(self):
        asides = expression_markers.mid_sentence_asides([
            "It works (mostly) fine.",
            "The pump — a cheap one — died.",
            "It failed, of course, after a week.",
        ])
        assert (asides.types.parenthetical, asides.types.dashes, asides.types.comma_asides) == (1, 1, 1)
        assert asides.count == 3
        assert asides.examples == ["(mostly)", "— a cheap one —", ", of course"]

    def test_contractions_and_emphasis(self):
        report = expression_markers.analyze("I don't know. It's fine, really.")
        assert report.contractions.count == 2
        assert report.emphatic_markers.examples == ["really"]

    def test_hedging(self):
        report = expression_markers.analyze("I think it might work, maybe.")
        assert report.hedging_phrases.count == 3

    def test_empty(self):
        report = expression_markers.analyze("")
        assert report.fragments.count == 0
        assert report.rhetorical_questions.rate == 0.0
