"""FLAGDASH FILE PURPOSE
Purpose: code-default feature catalog (seed for fresh history, reset, and sync).
Hot path: no (read on reset/sync and first boot only).
Feature flags: none.
Failure mode: catalog is static; a bad edit fails validation at first use.
"""

from __future__ import annotations

import copy
from typing import Any

from core.models import Feature, parse_features


def _routes(*rows: tuple[str, str, str]) -> dict[str, Any]:
    return {"routes": [{"method": m, "path": p, "handler": h} for m, p, h in rows]}


DEFAULT_FEATURES: list[dict[str, Any]] = [
    {
        "id": "user-auth",
        "name": "User Authentication",
        "version": "1.0.0",
        "enabled": True,
        "description": "Email/password and Google OAuth authentication",
        "backend": _routes(
            ("POST", "/api/auth/register", "auth/register.js"),
            ("POST", "/api/auth/login", "auth/login.js"),
            ("POST", "/api/auth/logout", "auth/logout.js"),
            ("GET", "/api/auth/me", "auth/me.js"),
            ("POST", "/api/auth/google", "auth/google.js"),
            ("POST", "/api/auth/refresh", "auth/refresh.js"),
        ),
        "config": {
            "JWT_SECRET": "${env.JWT_SECRET}",
            "JWT_EXPIRY": "7d",
            "BCRYPT_ROUNDS": 10,
            "GOOGLE_CLIENT_ID": "${env.GOOGLE_CLIENT_ID}",
            "GOOGLE_CLIENT_SECRET": "${env.GOOGLE_CLIENT_SECRET}",
        },
        "security": {"rateLimit": {"register": "3/hour/ip", "login": "5/15min/ip"}},
        "health": {
            "endpoint": "/api/health/auth",
            "timeout": 3000,
            "autoDisable": 3,
            "circuitBreaker": {"enabled": True, "failureThreshold": 5, "timeout": "30s"},
        },
        "dependencies": {"requires": []},
        "monitoring": {"metrics": ["auth_requests_total", "auth_failures_total"]},
    },
    {
        "id": "video-upload",
        "name": "Video Upload",
        "version": "1.0.0",
        "enabled": True,
        "description": "File upload and cloud storage",
        "backend": _routes(
            ("POST", "/api/upload/video", "upload/video.js"),
            ("POST", "/api/upload/thumbnail", "upload/thumbnail.js"),
            ("GET", "/api/upload/signed-url", "upload/signed-url.js"),
        ),
        "config": {
            "MAX_FILE_SIZE": "500MB",
            "ALLOWED_TYPES": "video/mp4,video/quicktime,video/x-msvideo",
            "GCS_BUCKET": "${env.GCS_BUCKET}",
        },
        "health": {"endpoint": "/api/health/upload", "autoDisable": 3},
        "dependencies": {"requires": ["user-auth"]},
    },
    {
        "id": "video-management",
        "name": "Video Management",
        "version": "1.0.0",
        "enabled": True,
        "description": "CRUD operations for videos",
        "backend": _routes(
            ("GET", "/api/videos", "video/list.js"),
            ("GET", "/api/videos/:id", "video/get.js"),
            ("PUT", "/api/videos/:id", "video/update.js"),
            ("DELETE", "/api/videos/:id", "video/delete.js"),
        ),
        "config": {},
        "health": {"endpoint": "/api/health/videos"},
        "dependencies": {"requires": ["user-auth", "video-upload"]},
    },
    {
        "id": "ai-generation",
        "name": "AI Video Generation",
        "version": "1.0.0",
        "enabled": True,
        "description": "Google Cloud AI video generation",
        "fallback": "ai-generation-sora",
        "backend": _routes(
            ("POST", "/api/ai/generate", "ai/generate.js"),
            ("GET", "/api/ai/status/:jobId", "ai/status.js"),
            ("POST", "/api/ai/jobs", "ai/create-job.js"),
        ),
        "config": {
            "AI_MODEL": "${env.AI_MODEL}",
            "AI_PROJECT_ID": "${env.GCP_PROJECT_ID}",
            "MAX_CONCURRENT_JOBS": 5,
        },
        "health": {
            "endpoint": "/api/health/ai",
            "autoDisable": 5,
            "circuitBreaker": {"enabled": True, "failureThreshold": 3},
        },
        "dependencies": {"requires": ["user-auth"]},
    },
    {
        "id": "ai-generation-sora",
        "name": "Sora Video Generation (Fallback)",
        "version": "1.0.0",
        "enabled": True,
        "description": "Secondary video generation using Sora as a fallback.",
        "fallback": None,
        "backend": _routes(("POST", "/api/ai/sora/generate", "ai/sora-generate.js")),
        "config": {"SORA_API_KEY": "${env.SORA_API_KEY}"},
        "health": {"endpoint": "/api/health/sora"},
        "dependencies": {"requires": ["user-auth"]},
    },
    {
        "id": "prompt-optimizer",
        "name": "Prompt Optimizer",
        "version": "1.0.0",
        "enabled": True,
        "description": "Refines user prompts into more descriptive options for better results.",
        "backend": _routes(("POST", "/api/ai/optimize-prompt", "ai/optimize-prompt.js")),
        "config": {"OPTIMIZER_MODEL": "gemini-pro"},
        "health": {"endpoint": "/api/health/prompt-optimizer"},
        "dependencies": {"requires": ["ai-generation"]},
        "fallback": None,
    },
    {
        "id": "social-publishing",
        "name": "Social Media Publishing",
        "version": "1.0.0",
        "enabled": True,
        "description": "Multi-platform content publishing",
        "backend": _routes(
            ("POST", "/api/social/publish", "social/publish.js"),
            ("GET", "/api/social/platforms", "social/platforms.js"),
            ("POST", "/api/social/youtube", "social/youtube.js"),
            ("POST", "/api/social/instagram", "social/instagram.js"),
            ("POST", "/api/social/tiktok", "social/tiktok.js"),
            ("GET", "/api/social/oauth/:platform", "social/oauth.js"),
        ),
        "config": {
            "YOUTUBE_CLIENT_ID": "${env.YOUTUBE_CLIENT_ID}",
            "YOUTUBE_CLIENT_SECRET": "${env.YOUTUBE_CLIENT_SECRET}",
            "INSTAGRAM_CLIENT_ID": "${env.INSTAGRAM_CLIENT_ID}",
            "TIKTOK_CLIENT_KEY": "${env.TIKTOK_CLIENT_KEY}",
        },
        "health": {"endpoint": "/api/health/social", "autoDisable": 3},
        "dependencies": {"requires": ["user-auth", "video-management"]},
    },
    {
        "id": "content-scheduling",
        "name": "Content Scheduling",
        "version": "1.0.0",
        "enabled": True,
        "description": "Job scheduling with Bull queues",
        "backend": _routes(
            ("POST", "/api/schedule", "schedule/create.js"),
            ("GET", "/api/schedule", "schedule/list.js"),
            ("DELETE", "/api/schedule/:id", "schedule/cancel.js"),
            ("PUT", "/api/schedule/:id", "schedule/update.js"),
        ),
        "config": {"REDIS_URL": "${env.REDIS_URL}", "MAX_RETRIES": 3},
        "health": {"endpoint": "/api/health/schedule"},
        "dependencies": {"requires": ["user-auth", "social-publishing"]},
    },
    {
        "id": "analytics-dashboard",
        "name": "Analytics Dashboard",
        "version": "1.0.0",
        "enabled": True,
        "description": "Performance metrics and reporting",
        "backend": _routes(
            ("GET", "/api/analytics/overview", "analytics/overview.js"),
            ("GET", "/api/analytics/videos/:id", "analytics/video.js"),
            ("GET", "/api/analytics/platforms", "analytics/platforms.js"),
        ),
        "config": {},
        "health": {"endpoint": "/api/health/analytics"},
        "dependencies": {"requires": ["user-auth", "video-management"]},
    },
    {
        "id": "email-notifications",
        "name": "Email Notifications",
        "version": "1.0.0",
        "enabled": False,
        "description": "Nodemailer email service",
        "fallback": "email-notifications-basic",
        "backend": _routes(
            ("POST", "/api/email/send", "email/send.js"),
            ("POST", "/api/email/welcome", "email/welcome.js"),
            ("POST", "/api/email/reset-password", "email/reset.js"),
        ),
        "config": {
            "SMTP_HOST": "${env.SMTP_HOST}",
            "SMTP_PORT": "${env.SMTP_PORT}",
            "SMTP_USER": "${env.SMTP_USER}",
            "SMTP_PASS": "${env.SMTP_PASS}",
        },
        "health": {"endpoint": "/api/health/email", "autoDisable": 5},
        "dependencies": {"requires": []},
    },
    {
        "id": "thumbnail-generation",
        "name": "Thumbnail Generation",
        "version": "1.0.0",
        "enabled": True,
        "description": "Video thumbnail processing",
        "backend": _routes(
            ("POST", "/api/thumbnails/generate", "thumbnail/generate.js"),
            ("GET", "/api/thumbnails/:videoId", "thumbnail/get.js"),
        ),
        "config": {"THUMBNAIL_WIDTH": 1280, "THUMBNAIL_HEIGHT": 720},
        "health": {"endpoint": "/api/health/thumbnails"},
        "dependencies": {"requires": ["video-upload"]},
    },
    {
        "id": "user-settings",
        "name": "User Settings",
        "version": "1.0.0",
        "enabled": True,
        "description": "Account management and preferences",
        "backend": _routes(
            ("GET", "/api/users/profile", "users/profile.js"),
            ("PUT", "/api/users/profile", "users/update-profile.js"),
            ("PUT", "/api/users/password", "users/change-password.js"),
            ("DELETE", "/api/users/account", "users/delete-account.js"),
        ),
        "config": {},
        "health": {"endpoint": "/api/health/users"},
        "dependencies": {"requires": ["user-auth"]},
    },
]


def default_features() -> list[Feature]:
    return parse_features(copy.deepcopy(DEFAULT_FEATURES))
