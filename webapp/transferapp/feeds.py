"""
feeds.py
========

RSS 2.0 блога: `/api/feed/rss/` — 15 последних опубликованных статей.

Ссылки абсолютные, от SITE_BASE_URL. Обложка статьи идёт в `<enclosure>`.
"""

from __future__ import annotations

from django.contrib.syndication.views import Feed
from django.utils.html import strip_tags
from django.utils.text import Truncator

from .models import BlogPost
from .seo import absolute_url

FEED_SIZE = 15


class BlogPostFeed(Feed):
    title = "RoyalTransfer - Блог о трансферах и путешествиях"
    description = "Статьи о путешествиях, трансферах и интересных местах от RoyalTransfer"
    language = "ru-ru"

    def link(self) -> str:
        return absolute_url("/blog/")

    def feed_url(self) -> str:
        return absolute_url("/api/feed/rss/")

    def items(self):
        return BlogPost.objects.filter(is_published=True)[:FEED_SIZE]

    def item_title(self, post: BlogPost) -> str:
        return post.title

    def item_description(self, post: BlogPost) -> str:
        return post.excerpt or Truncator(strip_tags(post.content)).chars(300)

    def item_link(self, post: BlogPost) -> str:
        return absolute_url(post.get_absolute_url())

    def item_pubdate(self, post: BlogPost):
        return post.published_at or post.created_at

    def item_updateddate(self, post: BlogPost):
        return post.updated_at

    def item_enclosure_url(self, post: BlogPost):
        return absolute_url(post.image_url) if post.image_url else None

    def item_enclosure_length(self, post: BlogPost) -> int:
        return 0

    def item_enclosure_mime_type(self, post: BlogPost) -> str:
        return "image/jpeg"
