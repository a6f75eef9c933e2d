class PathoReportError(Exception):
    """Base class for errors the engine reports to its callers."""


class ReportInputError(PathoReportError):
    """Operator input cannot be turned into a report; nothing was committed."""


class TemplateNotSelectedError(ReportInputError):
    def __init__(self, template_id: str | None = None):
        self.template_id = template_id
        if template_id:
            message = f"Unknown test type: {template_id}"
        else:
            message = "Please select a test type"
        super().__init__(message)


class BackupImportError(PathoReportError):
    """A backup document was rejected before anything was restored."""


class MalformedDocumentError(BackupImportError):
    pass


class UnexpectedShapeError(BackupImportError):
    pass
