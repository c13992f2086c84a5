# exception hierarchy shared by the engines, services, api and cli


class SlideSummarizerError(Exception):
    """Base class for every error raised by slidesummarizer"""


class InvalidArgumentError(SlideSummarizerError, ValueError):
    """A numeric argument violates its contract (negative count, bad limit)"""


class SummarizationError(SlideSummarizerError, RuntimeError):
    """The summarization provider could not produce a bundle"""


class ProjectFormatError(SlideSummarizerError, ValueError):
    """A persisted project document cannot be read back"""


class SlideNotFoundError(SlideSummarizerError, KeyError):
    """No slide with the requested id exists in the project"""


class BlockNotFoundError(SlideSummarizerError, KeyError):
    """No text block with the requested id exists on the slide"""


class TemplateNotFoundError(SlideSummarizerError, KeyError):
    """No template with the requested id exists in the library"""
