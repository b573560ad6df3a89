"""Rule-based multilingual tokenizer and sentence segmenter."""

__version__ = "0.1.0"
