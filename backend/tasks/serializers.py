# tasks/serializers.py

from rest_framework import serializers

from .engine import EnergyLevel, InvalidContextError, RecommendationContext
from .models import MAX_ESTIMATED_MINUTES, MIN_ESTIMATED_MINUTES, Recurrence, Task


class TaskSerializer(serializers.ModelSerializer):
    title = serializers.CharField(
        max_length=200,
        trim_whitespace=True,
        error_messages={
            'blank': 'Task title is required',
            'required': 'Task title is required',
            'max_length': 'Title cannot exceed 200 characters',
        },
    )
    description = serializers.CharField(
        max_length=1000,
        required=False,
        allow_blank=True,
        trim_whitespace=True,
        error_messages={'max_length': 'Description cannot exceed 1000 characters'},
    )
    energy_required = serializers.ChoiceField(
        choices=EnergyLevel.choices(),
        error_messages={'invalid_choice': 'Energy level must be low, medium, or high'},
    )
    estimated_time_minutes = serializers.IntegerField(
        min_value=MIN_ESTIMATED_MINUTES,
        max_value=MAX_ESTIMATED_MINUTES,
        error_messages={
            'min_value': 'Estimated time must be between 1 and 480 minutes',
            'max_value': 'Estimated time must be between 1 and 480 minutes',
        },
    )
    deadline = serializers.DateTimeField(required=False, allow_null=True)
    recurrence = serializers.ChoiceField(
        choices=Recurrence.choices,
        required=False,
        allow_blank=True,
    )
    is_completed = serializers.BooleanField(read_only=True)

    class Meta:
        model = Task
        # explicit whitelist: user-editable fields + system-read fields required by UI
        fields = [
            'id', 'title', 'description', 'energy_required', 'estimated_time_minutes',
            'deadline', 'recurrence', 'recurrence_parent',
            'is_completed', 'completed_at', 'created_at'
        ]
        read_only_fields = [
            'id', 'recurrence_parent', 'is_completed', 'completed_at', 'created_at'
        ]

    def create(self, validated_data):
        """
        Persist the task with the authenticated user.
        """
        user = self.context['request'].user
        if not user or not user.is_authenticated:
            raise serializers.ValidationError("Authentication required to create a task.")
        return Task.objects.create(user=user, **validated_data)


class RecommendationRequestSerializer(serializers.Serializer):
    """Validates the live context before it reaches the engine."""
    available_time_minutes = serializers.IntegerField(
        min_value=1,
        error_messages={'min_value': 'Available time must be at least 1 minute'},
    )
    current_energy = serializers.ChoiceField(
        choices=EnergyLevel.choices(),
        error_messages={'invalid_choice': 'Energy level must be low, medium, or high'},
    )

    def to_context(self) -> RecommendationContext:
        try:
            return RecommendationContext(
                available_time_minutes=self.validated_data['available_time_minutes'],
                current_energy=self.validated_data['current_energy'],
            )
        except InvalidContextError as e:
            raise serializers.ValidationError(str(e))


class ScoreBreakdownSerializer(serializers.Serializer):
    deadline_score = serializers.IntegerField()
    energy_match_score = serializers.IntegerField()
    time_efficiency_score = serializers.IntegerField()


class ScoredTaskSerializer(serializers.Serializer):
    # The snapshot keeps the ORM row it was built from
    task = TaskSerializer(source='task.source')
    score = serializers.IntegerField()
    breakdown = ScoreBreakdownSerializer()
    explanation = serializers.CharField()


class RecommendationResultSerializer(serializers.Serializer):
    recommended = ScoredTaskSerializer(allow_null=True)
    alternatives = ScoredTaskSerializer(many=True)
    message = serializers.CharField()
