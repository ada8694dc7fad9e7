"""Field extraction from form data and plain mappings."""

from formkit.extract.extractor import extract_data_from_form_data
from formkit.extract.models import ExtractionOptions

__all__ = ["ExtractionOptions", "extract_data_from_form_data"]
