"""
Test suite for the access policy evaluator.

Covers each decision rule in order, rule precedence, assignment
inheritance, the owner publish-gate flag, and the end-to-end scenarios
for anonymous, student, instructor and admin callers.

System role: Verification of the authorization core
"""

import uuid
from decimal import Decimal

import pytest

from marketplace.core.access import (
    ANONYMOUS,
    AccessTarget,
    Caller,
    DenialReason,
    Entitlement,
    Forbidden,
    Granted,
    NotFound,
    ResourceType,
    evaluate_access,
    is_owner,
)

OWNER_ID = uuid.uuid4()
OTHER_INSTRUCTOR_ID = uuid.uuid4()
STUDENT_ID = uuid.uuid4()


def make_target(
    is_published: bool = True,
    pricing: str = "0",
    resource_type: ResourceType = ResourceType.COURSE,
) -> AccessTarget:
    course_id = uuid.uuid4()
    resource_id = course_id if resource_type == ResourceType.COURSE else uuid.uuid4()
    return AccessTarget(
        resource_type=resource_type,
        resource_id=resource_id,
        course_id=course_id,
        instructor_id=OWNER_ID,
        is_published=is_published,
        pricing=Decimal(pricing),
    )


owner = Caller(user_id=OWNER_ID, role="instructor")
other_instructor = Caller(user_id=OTHER_INSTRUCTOR_ID, role="instructor")
student = Caller(user_id=STUDENT_ID, role="student")
admin = Caller(user_id=uuid.uuid4(), role="admin")

PAID_AND_ENROLLED = Entitlement(has_completed_payment=True, is_enrolled=True)
ENROLLED_ONLY = Entitlement(has_completed_payment=False, is_enrolled=True)
PAID_ONLY = Entitlement(has_completed_payment=True, is_enrolled=False)


class TestMissingResource:
    """Rule 1: nothing fetched."""

    @pytest.mark.parametrize("caller", [ANONYMOUS, student, owner, admin])
    def test_missing_target_is_not_found_for_every_caller(self, caller: Caller) -> None:
        assert evaluate_access(None, caller, PAID_AND_ENROLLED) == NotFound()


class TestPublishGate:
    """Rule 2: unpublished courses are hidden."""

    @pytest.mark.parametrize("caller", [ANONYMOUS, student, other_instructor, owner, admin])
    def test_unpublished_course_is_not_found(self, caller: Caller) -> None:
        target = make_target(is_published=False)

        assert evaluate_access(target, caller, PAID_AND_ENROLLED) == NotFound()

    def test_owner_passes_gate_when_flag_enabled(self) -> None:
        target = make_target(is_published=False)

        decision = evaluate_access(target, owner, owner_bypasses_publish_gate=True)

        assert decision == Granted()

    @pytest.mark.parametrize("caller", [ANONYMOUS, student, other_instructor, admin])
    def test_flag_only_admits_the_owner(self, caller: Caller) -> None:
        target = make_target(is_published=False)

        decision = evaluate_access(
            target, caller, PAID_AND_ENROLLED, owner_bypasses_publish_gate=True
        )

        assert decision == NotFound()

    def test_student_with_owner_id_is_not_treated_as_owner(self) -> None:
        impostor = Caller(user_id=OWNER_ID, role="student")
        target = make_target(is_published=False)

        decision = evaluate_access(target, impostor, owner_bypasses_publish_gate=True)

        assert decision == NotFound()


class TestInstructorRules:
    """Rules 3 and 4."""

    def test_owner_is_granted(self) -> None:
        assert evaluate_access(make_target(), owner) == Granted()

    def test_owner_of_paid_course_needs_no_entitlement(self) -> None:
        assert evaluate_access(make_target(pricing="49.99"), owner) == Granted()

    def test_other_instructor_is_forbidden(self) -> None:
        decision = evaluate_access(make_target(), other_instructor)

        assert decision == Forbidden(DenialReason.NOT_YOUR_COURSE)
        assert decision.reason.value == "not your course"

    def test_other_instructor_cannot_use_entitlements(self) -> None:
        decision = evaluate_access(make_target(), other_instructor, PAID_AND_ENROLLED)

        assert decision == Forbidden(DenialReason.NOT_YOUR_COURSE)


class TestStudentRules:
    """Rule 5: payment first, then enrollment."""

    def test_free_course_without_enrollment_is_not_enrolled(self) -> None:
        decision = evaluate_access(make_target(), student, Entitlement())

        assert decision == Forbidden(DenialReason.NOT_ENROLLED)

    def test_free_course_with_enrollment_is_granted(self) -> None:
        assert evaluate_access(make_target(), student, ENROLLED_ONLY) == Granted()

    def test_paid_course_without_payment_requires_payment(self) -> None:
        decision = evaluate_access(make_target(pricing="10"), student, Entitlement())

        assert decision == Forbidden(DenialReason.PAYMENT_REQUIRED)

    def test_payment_check_precedes_enrollment_check(self) -> None:
        decision = evaluate_access(make_target(pricing="10"), student, ENROLLED_ONLY)

        assert decision == Forbidden(DenialReason.PAYMENT_REQUIRED)

    def test_paid_course_paid_but_not_enrolled(self) -> None:
        decision = evaluate_access(make_target(pricing="10"), student, PAID_ONLY)

        assert decision == Forbidden(DenialReason.NOT_ENROLLED)

    def test_paid_course_paid_and_enrolled_is_granted(self) -> None:
        assert evaluate_access(make_target(pricing="10"), student, PAID_AND_ENROLLED) == Granted()

    def test_missing_entitlement_means_no_payment_and_no_enrollment(self) -> None:
        assert evaluate_access(make_target(), student) == Forbidden(DenialReason.NOT_ENROLLED)
        assert evaluate_access(make_target(pricing="1"), student) == Forbidden(
            DenialReason.PAYMENT_REQUIRED
        )

    def test_smallest_price_counts_as_paid(self) -> None:
        decision = evaluate_access(make_target(pricing="0.01"), student, ENROLLED_ONLY)

        assert decision == Forbidden(DenialReason.PAYMENT_REQUIRED)


class TestFallthrough:
    """Rule 6: everyone else."""

    def test_anonymous_is_told_to_authenticate(self) -> None:
        decision = evaluate_access(make_target(), ANONYMOUS)

        assert decision == Forbidden(DenialReason.AUTHENTICATION_REQUIRED)

    def test_admin_falls_through_to_authentication_required(self) -> None:
        decision = evaluate_access(make_target(), admin, PAID_AND_ENROLLED)

        assert decision == Forbidden(DenialReason.AUTHENTICATION_REQUIRED)

    def test_unknown_role_falls_through(self) -> None:
        caller = Caller(user_id=uuid.uuid4(), role="auditor")

        assert evaluate_access(make_target(), caller) == Forbidden(
            DenialReason.AUTHENTICATION_REQUIRED
        )

    def test_student_role_without_user_id_is_anonymous(self) -> None:
        caller = Caller(user_id=None, role="student")

        assert evaluate_access(make_target(), caller, PAID_AND_ENROLLED) == Forbidden(
            DenialReason.AUTHENTICATION_REQUIRED
        )


class TestAssignmentInheritance:
    """Assignments are decided exactly like their parent course."""

    @pytest.mark.parametrize(
        "caller,entitlement",
        [
            (ANONYMOUS, None),
            (student, None),
            (student, ENROLLED_ONLY),
            (student, PAID_ONLY),
            (student, PAID_AND_ENROLLED),
            (owner, None),
            (other_instructor, None),
            (admin, None),
        ],
    )
    @pytest.mark.parametrize("is_published,pricing", [(True, "0"), (True, "25"), (False, "0")])
    def test_assignment_decision_matches_course(
        self,
        caller: Caller,
        entitlement: Entitlement | None,
        is_published: bool,
        pricing: str,
    ) -> None:
        course = make_target(is_published=is_published, pricing=pricing)
        assignment = AccessTarget(
            resource_type=ResourceType.ASSIGNMENT,
            resource_id=uuid.uuid4(),
            course_id=course.course_id,
            instructor_id=course.instructor_id,
            is_published=course.is_published,
            pricing=course.pricing,
        )

        assert evaluate_access(assignment, caller, entitlement) == evaluate_access(
            course, caller, entitlement
        )


class TestDecisionProperties:
    """General properties of the evaluator."""

    def test_evaluation_is_idempotent(self) -> None:
        target = make_target(pricing="10")

        decisions = {evaluate_access(target, student, PAID_ONLY) for _ in range(5)}

        assert decisions == {Forbidden(DenialReason.NOT_ENROLLED)}

    def test_granted_implies_published(self) -> None:
        for caller, entitlement in [(owner, None), (student, PAID_AND_ENROLLED)]:
            for is_published in (True, False):
                target = make_target(is_published=is_published, pricing="5")
                if evaluate_access(target, caller, entitlement) == Granted():
                    assert target.is_published

    def test_allowed_property(self) -> None:
        assert Granted().allowed is True
        assert NotFound().allowed is False
        assert Forbidden(DenialReason.NOT_ENROLLED).allowed is False


class TestIsOwner:
    """Ownership helper."""

    def test_owner_instructor(self) -> None:
        assert is_owner(make_target(), owner) is True

    def test_other_instructor(self) -> None:
        assert is_owner(make_target(), other_instructor) is False

    def test_anonymous(self) -> None:
        assert is_owner(make_target(), ANONYMOUS) is False
