from django.db import models
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.utils.translation import gettext_lazy as _

from .engine import EnergyLevel

MIN_ESTIMATED_MINUTES = 1
MAX_ESTIMATED_MINUTES = 480


class Recurrence(models.TextChoices):
    NONE = '', _('Does not repeat')
    DAILY = 'daily', _('Daily')
    WEEKLY = 'weekly', _('Weekly')


class Task(models.Model):
    """
    A single to-do item the recommendation engine can pick from.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='tasks',
        verbose_name=_("user")
    )

    title = models.CharField(max_length=200, verbose_name=_("title"))
    description = models.TextField(max_length=1000, blank=True, verbose_name=_("description"))

    energy_required = models.CharField(
        max_length=10,
        choices=EnergyLevel.choices(),
        verbose_name=_("energy required"),
        help_text=_("How much energy the task takes (low, medium, high).")
    )
    estimated_time_minutes = models.PositiveSmallIntegerField(
        validators=[
            MinValueValidator(MIN_ESTIMATED_MINUTES),
            MaxValueValidator(MAX_ESTIMATED_MINUTES),
        ],
        verbose_name=_("estimated time (minutes)"),
        help_text=_("Between 1 minute and 8 hours.")
    )
    deadline = models.DateTimeField(
        null=True, blank=True,
        verbose_name=_("deadline"),
    )

    recurrence = models.CharField(
        max_length=10,
        choices=Recurrence.choices,
        default=Recurrence.NONE,
        blank=True,
        verbose_name=_("recurrence"),
        help_text=_("Completing a recurring task spawns its next occurrence.")
    )
    # Occurrence this task was spawned from; one successor per completion
    recurrence_parent = models.OneToOneField(
        'self',
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='next_occurrence',
        verbose_name=_("previous occurrence")
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    completed_at = models.DateTimeField(null=True, blank=True, verbose_name=_("completed at"))

    class Meta:
        verbose_name = _("Task")
        verbose_name_plural = _("Tasks")
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'completed_at'], name='task_user_completed_idx'),
        ]

    def __str__(self):
        return f"Task for {self.user.email}: {self.title}"

    @property
    def is_completed(self):
        return self.completed_at is not None

    @property
    def is_recurring(self):
        return bool(self.recurrence)
