"""
Models and operations served by the blog example.
"""

from mongoql import array, boolean, model, models, mutation, object, objectid, query, string

tweet = model(
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

user = model(
    "user",
    {
        "name": string().describe("User name").refine(lambda it: {"create": it.required()}),
        "email": string().email().describe("User email address"),
    },
)


@user.on("create")
def greet(ctx, next):
    next()
    ctx.state["greeted"] = ctx.response["createUser"]["name"]


def tags(ctx, next):
    ctx.response["tags"] = ["hello", "world"]
    return next()


def email_blast(ctx, next):
    emails = ctx.args("mutation", "emailBlast")["emails"]
    ctx.response["emailBlast"] = ", ".join(emails)
    return next()


api = models(
    tweet,
    user,
    query("tags", array(string()), tags),
    mutation(
        "emailBlast",
        string(),
        email_blast,
        args={"emails": array(string().email()).required()},
    ),
)
