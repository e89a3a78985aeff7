# Standard Library
from typing import Any, Dict
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextStats:
    """Statistics computed from the decoded content of a file.

    Attributes
    ----------
        line_count : int
            Number of segments separated by line breaks.
        word_count : int
            Number of whitespace separated tokens.
        char_count : int
            Length of the text in UTF-16 code units.
        preview : str
            Leading slice of the text, at most 100 code units long.
    """

    line_count: int = field(
        metadata={"description": "Number of line break separated segments."}
    )
    word_count: int = field(
        metadata={"description": "Number of whitespace separated tokens."}
    )
    char_count: int = field(
        metadata={"description": "Length of the text in UTF-16 code units."}
    )
    preview: str = field(
        metadata={"description": "Leading slice of the text."}
    )


@dataclass(frozen=True)
class StatisticsRecord:
    """A row of the results table, keyed by file name.

    Attributes
    ----------
        file_name : str
            The decoded S3 object key, used as the partition key.
        stats : TextStats
            The statistics computed for the file.
        processed_at : str
            ISO-8601 UTC timestamp of the write.
    """

    file_name: str = field(
        metadata={"description": "Partition key of the record."}
    )
    stats: TextStats = field(
        metadata={"description": "Statistics computed for the file."}
    )
    processed_at: str = field(
        metadata={"description": "ISO-8601 UTC timestamp of the write."}
    )

    def to_item(self) -> Dict[str, Any]:
        """Serialize the record into a DynamoDB item."""
        return {
            "fileName": self.file_name,
            "lineCount": self.stats.line_count,
            "wordCount": self.stats.word_count,
            "charCount": self.stats.char_count,
            "preview": self.stats.preview,
            "processedAt": self.processed_at,
        }

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "StatisticsRecord":
        """Build a record from a DynamoDB item.

        Numbers come back from the table resource as ``Decimal`` and are
        converted to ``int``.
        """
        return cls(
            file_name=item["fileName"],
            stats=TextStats(
                line_count=int(item["lineCount"]),
                word_count=int(item["wordCount"]),
                char_count=int(item["charCount"]),
                preview=item["preview"],
            ),
            processed_at=item["processedAt"],
        )
