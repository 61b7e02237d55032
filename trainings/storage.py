# storage.py
"""Object-storage helpers for training media (backed by Django's default_storage)."""
import logging
import os
from dataclasses import dataclass

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils import timezone
from django.utils.text import get_valid_filename

logger = logging.getLogger(__name__)


@dataclass
class StagedMedia:
    file: object
    file_type: str
    name: str


def media_kind(content_type):
    """'image' / 'video' for a MIME type, None for anything else."""
    content_type = (content_type or "").lower()
    if content_type.startswith("image/"):
        return "image"
    if content_type.startswith("video/"):
        return "video"
    return None


def stage_media(files):
    """
    Keep only image and video uploads, in the order they were selected.
    Returns (staged, rejected_names).
    """
    staged, rejected = [], []
    for f in files or []:
        kind = media_kind(getattr(f, "content_type", ""))
        name = getattr(f, "name", "") or "upload"
        if kind is None:
            rejected.append(name)
            continue
        staged.append(StagedMedia(file=f, file_type=kind, name=name))
    if rejected:
        logger.info("stage_media: dropped %d non-media file(s): %s", len(rejected), ", ".join(rejected))
    return staged, rejected


def media_path(training_id, filename):
    prefix = getattr(settings, "AGRITRAIN_MEDIA_PREFIX", "training-media").strip("/")
    stamp = timezone.now().strftime("%Y%m%d%H%M%S%f")
    safe = get_valid_filename(os.path.basename(filename)) or "upload"
    return f"{prefix}/{training_id}/{stamp}-{safe}"


def upload(path, file):
    """Store `file` at `path`; returns the storage name actually used."""
    return default_storage.save(path, file)


def public_url(name):
    return default_storage.url(name)
