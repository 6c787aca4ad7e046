"""
File: content_dao.py
Purpose: Data Access Object over the static content table.
"""
from portfolio import content
from portfolio.models.entities.page import Project, BlogPost


class ContentDAO:
    """
    Data Access Object for Projects and Blog Posts.
    Reads from an in-memory table; swap the rows for another source without touching the routes.
    """
    def __init__(self, projects=None, posts=None):
        self.project_rows = list(content.PROJECTS if projects is None else projects)
        self.post_rows = list(content.BLOG_POSTS if posts is None else posts)

    def get_all_projects(self):
        """Returns every project, in display order."""
        return tuple(
            Project(
                name=row['name'],
                description=row['description'],
                demo_path=row['demo_path'],
                repo_url=row['repo_url']
            )
            for row in self.project_rows
        )

    def get_all_posts(self):
        """Returns every blog post, in display order."""
        return tuple(
            BlogPost(title=row['title'], content=row['content'], slug=row['slug'])
            for row in self.post_rows
        )
