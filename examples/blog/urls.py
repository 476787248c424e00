from django.urls import include, path

from mongoql import graphqlize

from .api import tweet

urlpatterns = [
    # MONGOQL["schema"] served at MONGOQL["endpoint_path"]
    path("", include("mongoql.urls")),
    path("tweets/graphql/", graphqlize({"tweet": tweet})),
]
