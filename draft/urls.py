# draft/urls.py
from django.urls import include, path
from .views import DraftListView, DraftDetailView, DraftSelectView, DraftUndoView, DraftResetView
from .api import HeroListView, DraftSequenceView, TeamSplitView, PingView

urlpatterns = [
    path("api/drafts/", DraftListView.as_view()),
    path("api/drafts/<uuid:draft_id>/", DraftDetailView.as_view()),
    path("api/drafts/<uuid:draft_id>/select/", DraftSelectView.as_view()),
    path("api/drafts/<uuid:draft_id>/undo/", DraftUndoView.as_view()),
    path("api/drafts/<uuid:draft_id>/reset/", DraftResetView.as_view()),
    path("api/draft/sequence/", DraftSequenceView.as_view()),
    path("api/draft/simulate/", TeamSplitView.as_view()),
    path("api/heroes/", HeroListView.as_view()),
    path("api/ping/", PingView.as_view()),
    path("api/", include("matches.urls")),
]
