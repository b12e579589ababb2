"""
Unit Tests for upload validation
"""
import pytest

from hostelia.config.settings import Settings
from hostelia.core.exceptions import ValidationError
from hostelia.utils.file_validation import validate_file_extension, validate_upload


@pytest.fixture
def upload_settings():
    return Settings(MAX_UPLOAD_SIZE=2 * 1024 * 1024, ALLOWED_EXTENSIONS='png,jpg,jpeg,pdf')


class TestValidateUpload:

    def test_accepts_pdf(self, upload_settings):
        validate_upload('receipt.pdf', 'application/pdf', 1024, upload_settings)

    def test_extension_check_ignores_case(self):
        assert validate_file_extension('SCAN.JPG', ['.jpg'])

    def test_rejects_wrong_type(self, upload_settings):
        with pytest.raises(ValidationError) as exc_info:
            validate_upload('notes.docx', 'application/msword', 1024, upload_settings)

        field_errors = exc_info.value.details['field_errors']
        assert 'file' in field_errors
        assert 'filename' in field_errors

    def test_rejects_large_file(self, upload_settings):
        with pytest.raises(ValidationError) as exc_info:
            validate_upload('receipt.png', 'image/png', 3 * 1024 * 1024, upload_settings)

        assert exc_info.value.details['field_errors']['size'] == ['File size must be less than 2MB']

    def test_rejects_empty_file(self, upload_settings):
        with pytest.raises(ValidationError):
            validate_upload('receipt.png', 'image/png', 0, upload_settings)

    def test_requires_a_file(self, upload_settings):
        with pytest.raises(ValidationError) as exc_info:
            validate_upload('', '', 0, upload_settings)

        assert exc_info.value.details['field_errors'] == {'file': ['Please select a file']}
