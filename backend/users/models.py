from django.db import models
from django.contrib.auth.models import AbstractBaseUser,PermissionsMixin 
from django.utils.translation import gettext_lazy as _
from .managers import CustomUserManager


class CustomUser(AbstractBaseUser,PermissionsMixin):
    """
    Account owning a personal task list.
    Uses email as the unique auth field; there is no username.
    """
    email=models.EmailField(
        _('email address'),
        unique=True
        # Stored lower-cased by the manager so lookups are case-insensitive
    )

    # Core permissions fields for superuser capabilities
    is_staff = models.BooleanField(
        _('staff status'),
        default=False,
        help_text=_('Designates whether the user can log into this admin site.'),
    )
    is_active = models.BooleanField(
        _('active'),
        default=True,
        help_text=_(
            'Designates whether this user should be treated as active. '
            'Unselect this instead of deleting accounts.'
        ),
    )
    date_joined = models.DateTimeField(_('date joined'), auto_now_add=True)

    # ------------------ Model Configuration ------------------
    objects = CustomUserManager()

    # The field used for authentication (login)
    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'

    # Nothing beyond email and password is asked for by createsuperuser
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = _('user')
        verbose_name_plural = _('users')

    def get_full_name(self):
        return self.email

    def get_short_name(self):
        return self.email.split('@')[0]

    def __str__(self):
        return self.email
