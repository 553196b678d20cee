"""Message descriptor extraction.

Recognizes message declaration sites in a host tree, builds and validates
their descriptors, and aggregates them per unit and per run.

Python 3.13+.
"""

from .catalog import ExtractionRun, MessageCatalog, RunResult
from .descriptor import MessageDescriptor, Normalizer, build_descriptor, descriptor_key
from .evaluator import UNDEFINED, Evaluation, Evaluator, evaluate
from .identifiers import generate_message_id
from .options import ExtractionOptions
from .persistence import messages_path, read_messages, write_messages
from .recognizers import ExtractionContext, MessageExtractor, recognize_call, recognize_element
from .registry import MessageRegistry
from .unit import CompilationUnit, UnitAggregator, UnitResult, extract_messages

__all__ = [
    "UNDEFINED",
    "CompilationUnit",
    "Evaluation",
    "Evaluator",
    "ExtractionContext",
    "ExtractionOptions",
    "ExtractionRun",
    "MessageCatalog",
    "MessageDescriptor",
    "MessageExtractor",
    "MessageRegistry",
    "Normalizer",
    "RunResult",
    "UnitAggregator",
    "UnitResult",
    "build_descriptor",
    "descriptor_key",
    "evaluate",
    "extract_messages",
    "generate_message_id",
    "messages_path",
    "read_messages",
    "recognize_call",
    "recognize_element",
    "write_messages",
]
