"""
GraphQL schema for the sample users/posts dataset.

Resolvers read the store from ``info.context.sample_store`` when the
execution context provides one, and fall back to the process default
store otherwise (the HTTP endpoint case).
"""

import logging

import graphene

from .store import SampleStore, default_store

logger = logging.getLogger(__name__)


def get_store(info) -> SampleStore:
    return getattr(info.context, "sample_store", None) or default_store


class UserType(graphene.ObjectType):
    class Meta:
        name = "User"

    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    email = graphene.String(required=True)
    age = graphene.Int(required=True)
    posts = graphene.List(graphene.NonNull(lambda: PostType), required=True)

    def resolve_posts(parent, info):
        return get_store(info).posts_by_author(parent.id)


class PostType(graphene.ObjectType):
    class Meta:
        name = "Post"

    id = graphene.ID(required=True)
    title = graphene.String(required=True)
    content = graphene.String(required=True)
    author_id = graphene.ID(required=True)
    author = graphene.Field(UserType, required=True)

    def resolve_author(parent, info):
        return get_store(info).get_user(parent.author_id)


class Query(graphene.ObjectType):
    users = graphene.List(graphene.NonNull(UserType), required=True)
    user = graphene.Field(UserType, id=graphene.ID(required=True))
    posts = graphene.List(graphene.NonNull(PostType), required=True)
    post = graphene.Field(PostType, id=graphene.ID(required=True))
    # "name" is a reserved Field keyword, so arguments go through args=.
    search_users = graphene.Field(
        graphene.List(graphene.NonNull(UserType)),
        required=True,
        args={"name": graphene.String()},
    )

    def resolve_users(root, info):
        return get_store(info).list_users()

    def resolve_user(root, info, id):
        return get_store(info).get_user(id)

    def resolve_posts(root, info):
        return get_store(info).list_posts()

    def resolve_post(root, info, id):
        return get_store(info).get_post(id)

    def resolve_search_users(root, info, name=None):
        return get_store(info).search_users(name)


class Mutation(graphene.ObjectType):
    create_user = graphene.Field(
        UserType,
        required=True,
        args={
            "name": graphene.String(required=True),
            "email": graphene.String(required=True),
            "age": graphene.Int(required=True),
        },
    )
    update_user = graphene.Field(
        UserType,
        args={
            "id": graphene.ID(required=True),
            "name": graphene.String(),
            "email": graphene.String(),
            "age": graphene.Int(),
        },
    )
    delete_user = graphene.Boolean(required=True, id=graphene.ID(required=True))

    def resolve_create_user(root, info, name, email, age):
        user = get_store(info).create_user(name=name, email=email, age=age)
        logger.info("Created sample user %s", user.id)
        return user

    def resolve_update_user(root, info, id, name=None, email=None, age=None):
        return get_store(info).update_user(id, name=name, email=email, age=age)

    def resolve_delete_user(root, info, id):
        return get_store(info).delete_user(id)


schema = graphene.Schema(query=Query, mutation=Mutation)


__all__ = ["Mutation", "PostType", "Query", "UserType", "get_store", "schema"]
