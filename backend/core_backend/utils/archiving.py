"""
Archiving for catalog and staff rows.

Menu items, categories and staff are never deleted: past orders keep pointing
at them. Deleting one marks it inactive instead, and the default manager
hides inactive rows from the storefront and the admin API.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone

ARCHIVE_FIELDS = ['is_active', 'archived_at', 'archived_by']


class SoftDeleteQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def archived(self):
        return self.filter(is_active=False)


class SoftDeleteManager(models.Manager):
    """Default manager: only rows that are still on offer."""

    def _all_rows(self):
        return SoftDeleteQuerySet(self.model, using=self._db)

    def get_queryset(self):
        return self._all_rows().active()

    def with_archived(self):
        return self._all_rows()

    def archived_only(self):
        return self._all_rows().archived()


class SoftDeleteMixin(models.Model):
    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Unchecked once the record is archived and no longer offered.",
    )
    archived_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the record was archived.",
    )
    archived_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(app_label)s_%(class)s_archived",
        help_text="Who archived the record.",
    )

    objects = SoftDeleteManager()

    class Meta:
        abstract = True

    @property
    def is_archived(self):
        return not self.is_active

    def archive(self, archived_by=None):
        self.is_active = False
        self.archived_at = timezone.now()
        self.archived_by = archived_by
        self.save(update_fields=ARCHIVE_FIELDS)

    def unarchive(self):
        self.is_active = True
        self.archived_at = None
        self.archived_by = None
        self.save(update_fields=ARCHIVE_FIELDS)

    def delete(self, using=None, keep_parents=False):
        """Archives instead of deleting; the row stays for order history."""
        self.archive()
