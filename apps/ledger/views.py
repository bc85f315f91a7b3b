from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.services import get_member, MemberNotFoundError
from .serializers import (
    TransactionSerializer,
    TransactionCreateSerializer,
    ContributionHistoryQuerySerializer,
    ErrorResponseSerializer,
)
from .services import (
    record_transaction,
    get_member_transactions,
    get_contribution_history,
)
from .exceptions import LedgerServiceError, TransactionNotPermittedError


@extend_schema(
    methods=['GET'],
    responses={200: TransactionSerializer(many=True)},
    description="List the current member's transactions, newest first.",
    tags=['transactions'],
)
@extend_schema(
    methods=['POST'],
    request=TransactionCreateSerializer,
    responses={201: TransactionSerializer, 403: ErrorResponseSerializer},
    description="Record a transaction (contribution by default) on the current member's account. "
                "Dividends, withdrawals and fees are staff-only.",
    tags=['transactions'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def transactions(request):
    """List or record the current member's transactions - thin HTTP handler."""
    if request.method == 'GET':
        records = get_member_transactions(member_id=request.user.id)
        return Response(TransactionSerializer(records, many=True).data)

    serializer = TransactionCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        record = record_transaction(
            member=request.user,
            recorded_by=request.user,
            **serializer.validated_data
        )
    except TransactionNotPermittedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except LedgerServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(TransactionSerializer(record).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('year', OpenApiTypes.INT, description='Calendar year filter'),
    ],
    responses={200: TransactionSerializer(many=True)},
    description="Get a member's contribution history, optionally for a single year.",
    tags=['members'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def member_contributions(request, member_id):
    """Member contribution history - thin HTTP handler."""
    query_serializer = ContributionHistoryQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        member = get_member(member_id=member_id)
    except MemberNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    try:
        history = get_contribution_history(
            member_id=member.id,
            year=query_serializer.validated_data.get('year'),
        )
    except LedgerServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(TransactionSerializer(history, many=True).data)
