from django.urls import path
from .views import (
    MatchDetailView,
    MatchListView,
    MatchPlayerListView,
    PlayerDetailView,
    PlayerHeroDetailView,
    PlayerHeroListView,
    PlayerListView,
    RecentMatchesView,
    TeamDashboardView,
    TeamDetailView,
    TeamListView,
    TeamRosterView,
    UpcomingMatchesView,
)

urlpatterns = [
    path("players/", PlayerListView.as_view()),
    path("players/<int:player_id>/", PlayerDetailView.as_view()),
    path("players/<int:player_id>/heroes/", PlayerHeroListView.as_view()),
    path("players/<int:player_id>/heroes/<str:hero_id>/", PlayerHeroDetailView.as_view()),
    path("matches/", MatchListView.as_view()),
    path("matches/recent/", RecentMatchesView.as_view()),
    path("matches/upcoming/", UpcomingMatchesView.as_view()),
    path("matches/<int:match_id>/", MatchDetailView.as_view()),
    path("matches/<int:match_id>/players/", MatchPlayerListView.as_view()),
    path("teams/", TeamListView.as_view()),
    path("teams/<int:team_id>/", TeamDetailView.as_view()),
    path("teams/<int:team_id>/players/", TeamRosterView.as_view()),
    path("teams/<int:team_id>/dashboard/", TeamDashboardView.as_view()),
]
