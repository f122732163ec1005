"""Root of the exam-sampler exception hierarchy."""


class ExamSamplerError(Exception):
    """Base class for all exam-sampler errors.

    The CLI prints the message of any ExamSamplerError and exits with code 1;
    anything else reaching the CLI is reported as a bug.
    """
