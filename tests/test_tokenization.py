from writing_metrics.tokenization import paragraphs, sentences, split_whitespace, words


def test_words_are_lowercase_ascii_runs():
    assert words("Hello, World! It's 3pm.") == ["hello", "world", "it", "s", "3pm"]


def test_sentences_drop_blank_fragments():
    assert sentences("The cat sat. The cat ran.") == ["The cat sat", "The cat ran"]
    assert sentences("Wait...   really?!") == ["Wait", "really"]
    assert sentences("  ...?!  ") == []


def test_paragraphs_split_on_blank_lines():
    """Whitespace-only gaps collapse into a single paragraph break."""
    assert paragraphs("One.\n\n  \n\nTwo.\nStill two.") == ["One.", "Two.\nStill two."]
    assert paragraphs("\n\n\n") == []


def test_split_whitespace_handles_empty_fragment():
    assert split_whitespace("") == []
    assert split_whitespace("  a\tb\nc ") == ["a", "b", "c"]


def test_segmentation_is_idempotent():
    text = "First line here.\n\nSecond paragraph! With two sentences?"
    assert sentences(text) == sentences(text)
    assert paragraphs("\n\n".join(paragraphs(text))) == paragraphs(text)
