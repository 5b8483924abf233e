import dataclasses as dc

__all__ = ['DummySpanContext', 'DummySpan', 'DummyTraceProvider']


@dc.dataclass
class DummySpanContext:
    trace_id: int = 15
    span_id: int = 15
    is_valid: bool = True


@dc.dataclass
class DummySpan:
    context: DummySpanContext

    def get_span_context(self):
        return self.context


class DummyTraceProvider:
    '''Replaces `opentelemetry.trace` inside OTLPJsonFormatter. `is_valid=False` acts as "no active span"'''
    def __init__(self, is_valid: bool = True):
        self.span = DummySpan(DummySpanContext(is_valid=is_valid))

    def get_current_span(self):
        return self.span
