from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .analytics import AnalyticsQueries
from .exceptions import AnalyticsServiceError
from .serializers import (
    MonthlyPerformanceQuerySerializer,
    GroupPerformanceSerializer,
    MonthlyPerformanceSerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Get the current member's dashboard: balance, recent transactions and group performance.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Member dashboard - thin HTTP handler."""
    data = AnalyticsQueries.member_dashboard(request.user)
    return Response(DashboardResponseSerializer(data).data)


@extend_schema(
    responses={200: GroupPerformanceSerializer},
    description="Get the latest group performance snapshot (null if none recorded).",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def group_performance(request):
    """Latest group performance snapshot."""
    snapshot = AnalyticsQueries.latest_group_performance()
    if snapshot is None:
        return Response(None)
    return Response(GroupPerformanceSerializer(snapshot).data)


@extend_schema(
    parameters=[
        OpenApiParameter('limit', OpenApiTypes.INT, description='Number of months (default 6)'),
    ],
    responses={
        200: MonthlyPerformanceSerializer(many=True),
        400: ErrorSerializer,
    },
    description="Get monthly group returns, newest month first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def monthly_performance(request):
    """Monthly performance series."""
    query_serializer = MonthlyPerformanceQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        series = AnalyticsQueries.monthly_performance(query_serializer.validated_data['limit'])
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(MonthlyPerformanceSerializer(series, many=True).data)
