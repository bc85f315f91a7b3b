from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    InvestmentSerializer,
    InvestmentCreateSerializer,
    InvestmentListQuerySerializer,
    VoteSerializer,
    SubmitVoteSerializer,
    VoteSummarySerializer,
    ActivationResultSerializer,
)

from apps.investments.services import (
    create_investment,
    get_investment_by_id,
    list_investments,
    cast_vote,
    get_votes,
    get_vote_for_member,
    get_vote_summary,
    evaluate_activation,
    # Exceptions
    InvestmentsServiceError,
    NotFound,
    ValidationError,
    StorageError,
)


def service_error_response(error: InvestmentsServiceError) -> Response:
    """Translate a service exception into an HTTP error response."""
    if isinstance(error, NotFound):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, StorageError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_400_BAD_REQUEST
    return Response({'error': str(error)}, status=code)


class InvestmentViewSet(viewsets.GenericViewSet):
    """
    ViewSet for investment proposals and voting.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all investments (optionally filtered by ?active=)
    create: Propose a new investment (starts pending)
    retrieve: Get a specific investment
    vote: Submit or change the current member's vote
    votes: Get all votes on the investment
    my_vote: Get the current member's vote, or null
    summary: Get approval standing against the quorum
    evaluate: Re-run the activation check (staff only)
    """

    serializer_class = InvestmentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return list_investments()

    @extend_schema(
        parameters=[
            OpenApiParameter('active', OpenApiTypes.BOOL, description='Only active (true) or pending (false)'),
        ],
        responses={200: InvestmentSerializer(many=True)},
    )
    def list(self, request):
        """List investments."""
        query_serializer = InvestmentListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        investments = list_investments(active=query_serializer.validated_data.get('active'))
        return Response(InvestmentSerializer(investments, many=True).data)

    @extend_schema(request=InvestmentCreateSerializer, responses={201: InvestmentSerializer})
    def create(self, request):
        """Propose a new investment."""
        serializer = InvestmentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            investment = create_investment(
                proposed_by=request.user,
                **serializer.validated_data
            )
        except InvestmentsServiceError as e:
            return service_error_response(e)

        return Response(InvestmentSerializer(investment).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        """Get a single investment."""
        try:
            investment = get_investment_by_id(investment_id=pk)
        except InvestmentsServiceError as e:
            return service_error_response(e)

        return Response(InvestmentSerializer(investment).data)

    @extend_schema(request=SubmitVoteSerializer, responses={200: VoteSerializer, 201: VoteSerializer})
    @action(detail=True, methods=['post'])
    def vote(self, request, pk=None):
        """Submit or change the current member's vote. 201 for a first vote, 200 when it replaced one."""
        serializer = SubmitVoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            vote, created = cast_vote(
                investment_id=pk,
                voter_id=request.user.id,
                approve=serializer.validated_data['approve']
            )
        except InvestmentsServiceError as e:
            return service_error_response(e)

        code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
        return Response(VoteSerializer(vote).data, status=code)

    @extend_schema(responses={200: VoteSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def votes(self, request, pk=None):
        """Get all votes on the investment."""
        try:
            votes = get_votes(investment_id=pk)
        except InvestmentsServiceError as e:
            return service_error_response(e)

        return Response(VoteSerializer(votes, many=True).data)

    @extend_schema(responses={200: VoteSerializer})
    @action(detail=True, methods=['get'], url_path='my-vote', url_name='my-vote')
    def my_vote(self, request, pk=None):
        """Get the current member's vote; null if they have not voted."""
        try:
            vote = get_vote_for_member(investment_id=pk, voter_id=request.user.id)
        except InvestmentsServiceError as e:
            return service_error_response(e)

        if vote is None:
            return Response(None)
        return Response(VoteSerializer(vote).data)

    @extend_schema(responses={200: VoteSummarySerializer})
    @action(detail=True, methods=['get'])
    def summary(self, request, pk=None):
        """Get approval standing against the quorum."""
        try:
            summary = get_vote_summary(investment_id=pk)
        except InvestmentsServiceError as e:
            return service_error_response(e)

        return Response(VoteSummarySerializer(summary).data)

    @extend_schema(request=None, responses={200: ActivationResultSerializer})
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated, IsAdminUser])
    def evaluate(self, request, pk=None):
        """Re-run the activation check (staff only)."""
        try:
            activated = evaluate_activation(investment_id=pk)
            investment = get_investment_by_id(investment_id=pk)
        except InvestmentsServiceError as e:
            return service_error_response(e)

        return Response({
            'activated': activated,
            'investment': InvestmentSerializer(investment).data,
        })
