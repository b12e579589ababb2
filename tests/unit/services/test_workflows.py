"""
Unit Tests for complaint and fee status transitions
"""
from datetime import datetime, timezone

import pytest

from hostelia.core.exceptions import InvalidTransitionError, ValidationError
from hostelia.schemas.common.enums import (
    ComplaintStatus,
    FeeReviewDecision,
    FeeStatus,
    StudentVerificationStatus,
)
from hostelia.schemas.complaint.complaint_base import Complaint
from hostelia.schemas.fee.fee_base import FeeDocument
from hostelia.services.complaint.complaint_workflow import (
    apply_student_verification,
    apply_warden_status,
)
from hostelia.services.fee.fee_workflow import review_fee_document, submit_fee_document

NOW = datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)
DOC_URL = 'https://res.cloudinary.com/demo/raw/upload/v1/receipt.pdf'


@pytest.fixture
def complaint(make_complaint):
    def _build(**overrides) -> Complaint:
        return Complaint.model_validate(make_complaint(**overrides))
    return _build


class TestWardenStatus:
    """Staff status changes"""

    def test_resolving_waits_for_student_confirmation(self, complaint):
        current = complaint(status='Pending')

        updated = apply_warden_status(current, ComplaintStatus.RESOLVED, now=NOW)

        assert updated.status == ComplaintStatus.TO_BE_CONFIRMED
        assert updated.resolved_at == NOW

    def test_input_is_not_mutated(self, complaint):
        current = complaint(status='Pending')

        apply_warden_status(current, ComplaintStatus.RESOLVED, now=NOW)

        assert current.status == ComplaintStatus.PENDING
        assert current.resolved_at is None

    def test_reopening_resets_student_verdict(self, complaint):
        current = complaint(status='ToBeConfirmed', studentStatus='Rejected')

        updated = apply_warden_status(current, ComplaintStatus.PENDING)

        assert updated.status == ComplaintStatus.PENDING
        assert updated.student_status == StudentVerificationStatus.NOT_RESOLVED

    def test_resolved_complaint_can_be_reopened(self, complaint):
        current = complaint(status='Resolved', studentStatus='Resolved')

        assert current.is_terminal is False
        updated = apply_warden_status(current, ComplaintStatus.PENDING)

        assert updated.status == ComplaintStatus.PENDING
        assert updated.student_status == StudentVerificationStatus.NOT_RESOLVED

    def test_rejecting_a_pending_complaint(self, complaint):
        updated = apply_warden_status(complaint(status='Pending'), ComplaintStatus.REJECTED)

        assert updated.status == ComplaintStatus.REJECTED

    @pytest.mark.parametrize('requested', list(ComplaintStatus))
    def test_rejected_complaint_is_final(self, complaint, requested):
        with pytest.raises(InvalidTransitionError) as exc_info:
            apply_warden_status(complaint(status='Rejected'), requested)

        assert exc_info.value.status_code == 409


class TestStudentVerification:
    """Student verdict on a resolution"""

    def test_confirming_resolves_the_complaint(self, complaint):
        updated = apply_student_verification(
            complaint(status='ToBeConfirmed'),
            StudentVerificationStatus.RESOLVED,
            now=NOW,
        )

        assert updated.status == ComplaintStatus.RESOLVED
        assert updated.student_status == StudentVerificationStatus.RESOLVED
        assert updated.student_verified_at == NOW

    def test_rejecting_reopens_the_complaint(self, complaint):
        updated = apply_student_verification(
            complaint(status='ToBeConfirmed'),
            StudentVerificationStatus.REJECTED,
        )

        assert updated.status == ComplaintStatus.PENDING
        assert updated.student_status == StudentVerificationStatus.REJECTED

    def test_only_awaiting_complaints_can_be_verified(self, complaint):
        with pytest.raises(InvalidTransitionError):
            apply_student_verification(complaint(status='Pending'), StudentVerificationStatus.RESOLVED)

    def test_not_resolved_is_not_a_verdict(self, complaint):
        with pytest.raises(ValidationError) as exc_info:
            apply_student_verification(
                complaint(status='ToBeConfirmed'),
                StudentVerificationStatus.NOT_RESOLVED,
            )

        assert 'student_status' in exc_info.value.details['field_errors']


class TestFeeSubmission:
    """Document upload transitions"""

    def test_first_submission(self):
        document = submit_fee_document(FeeDocument(), DOC_URL, now=NOW)

        assert document.status == FeeStatus.PENDING
        assert document.document_url == DOC_URL
        assert document.submitted_at == NOW

    def test_resubmission_after_rejection_clears_reason(self):
        rejected = FeeDocument(status='rejected', rejectionReason='Wrong amount')

        document = submit_fee_document(rejected, DOC_URL, now=NOW)

        assert document.status == FeeStatus.PENDING
        assert document.rejection_reason is None

    @pytest.mark.parametrize('status', ['pending', 'approved'])
    def test_cannot_resubmit_while_pending_or_approved(self, status):
        with pytest.raises(InvalidTransitionError):
            submit_fee_document(FeeDocument(status=status), DOC_URL)

    def test_url_is_required(self):
        with pytest.raises(ValidationError):
            submit_fee_document(FeeDocument(), '   ')


class TestFeeReview:
    """Warden review of a pending document"""

    def test_approve(self):
        document = review_fee_document(FeeDocument(status='pending'), FeeReviewDecision.APPROVED)

        assert document.status == FeeStatus.APPROVED
        assert document.rejection_reason is None

    def test_reject_with_reason(self):
        document = review_fee_document(
            FeeDocument(status='pending'),
            FeeReviewDecision.REJECTED,
            '  Receipt is blurred ',
        )

        assert document.status == FeeStatus.REJECTED
        assert document.rejection_reason == 'Receipt is blurred'

    def test_reject_requires_reason(self):
        with pytest.raises(ValidationError) as exc_info:
            review_fee_document(FeeDocument(status='pending'), FeeReviewDecision.REJECTED, '')

        assert exc_info.value.status_code == 422

    @pytest.mark.parametrize('status', ['documentNotSubmitted', 'approved', 'rejected'])
    def test_only_pending_documents_are_reviewed(self, status):
        with pytest.raises(InvalidTransitionError):
            review_fee_document(FeeDocument(status=status), FeeReviewDecision.APPROVED)
