from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from core_backend.utils.archiving import SoftDeleteMixin


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        email = self.normalize_email(email) if email else None
        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email=None, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("is_admin", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_admin", True)

        if not email:
            raise ValueError("Superuser must have an email address.")
        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Identity record. Dashboard users sign in with email + password; Telegram
    customers are identified by their Telegram user id and may have no email.
    """

    email = models.EmailField(_("email address"), unique=True, null=True, blank=True)
    first_name = models.CharField(_("first name"), max_length=150, blank=True)
    last_name = models.CharField(_("last name"), max_length=150, blank=True)
    profile_image_url = models.URLField(max_length=500, blank=True)

    telegram_user_id = models.CharField(
        _("Telegram user id"), max_length=64, unique=True, null=True, blank=True
    )
    telegram_username = models.CharField(_("Telegram username"), max_length=150, blank=True)

    is_admin = models.BooleanField(
        _("administrator"),
        default=False,
        help_text=_("Designates whether this user can manage the menu, orders, staff and settings."),
        db_index=True,
    )
    is_staff = models.BooleanField(
        _("staff status"),
        default=False,
        help_text=_("Designates whether the user can log into the Django admin site."),
    )
    is_active = models.BooleanField(_("active"), default=True)

    created_at = models.DateTimeField(_("created at"), default=timezone.now)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["first_name", "last_name"], name="users_user_name_idx"),
        ]

    def __str__(self):
        if self.email:
            return self.email
        if self.telegram_username:
            return f"@{self.telegram_username}"
        return f"telegram:{self.telegram_user_id}"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()


class Staff(SoftDeleteMixin):
    """Restaurant staff directory entry. Staff do not sign in."""

    class Role(models.TextChoices):
        KITCHEN = "kitchen", _("Kitchen")
        DELIVERY = "delivery", _("Delivery")
        MANAGER = "manager", _("Manager")

    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=200, unique=True, null=True, blank=True)
    phone = models.CharField(max_length=20, blank=True)
    role = models.CharField(max_length=50, choices=Role.choices)
    hire_date = models.DateTimeField(default=timezone.now)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Staff Member"
        verbose_name_plural = "Staff"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["role", "is_active"], name="users_staff_role_active_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_role_display()})"
