"""
Models served by ``mongoql.urls`` in the test settings.
"""

import mongomock

from mongoql import array, boolean, models, mutation, object, objectid, query, string
from mongoql.core.store import DocumentStore

store = DocumentStore(client=mongomock.MongoClient(), database="mongoql_urls").open()

tweet = store.model(
    "tweet",
    {
        "body": string()
        .describe("Tweet body, no more than 150 characters")
        .refine(lambda it: {"create": it.required().max_length(150)}),
        "published": boolean()
        .describe("Visible to public or not")
        .refine(lambda it: {"create": it.default(False)}),
        "userId": objectid().describe("User ID"),
        "comments": array(
            object(
                {
                    "body": string().refine(lambda it: {"create": it.required()}),
                    "userId": objectid(),
                }
            ).named("Comment")
        ).describe("Comments on the tweet"),
    },
)

user = store.model(
    "user",
    {
        "name": string()
        .describe("User name")
        .refine(lambda it: {"create": it.required()}),
        "email": string().email().describe("User email address"),
    },
)


def _tags(ctx, next):
    ctx.response["tags"] = ["hello", "world"]
    return next()


def _email_blast(ctx, next):
    emails = ctx.args("mutation", "emailBlast")["emails"]
    ctx.response["emailBlast"] = ", ".join(emails)
    return next()


tags = query("tags", array(string()), _tags)

email_blast = mutation(
    "emailBlast",
    string(),
    _email_blast,
    args={"emails": array(string().email()).required()},
)

api = models(email_blast, tweet, user, tags)
