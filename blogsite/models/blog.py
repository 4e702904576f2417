from datetime import datetime
from blogsite.extensions import db


# blogsite/models/blog.py
class Blog(db.Model):
    __tablename__ = "blogs"

    id = db.Column(db.Integer, primary_key=True)

    # 🌟 slug público, distinto del id interno
    blog_id = db.Column(db.String(255), unique=True, nullable=False, index=True)

    # 🧠 Contenido
    title = db.Column(db.Text, nullable=False)
    des = db.Column(db.Text, nullable=True)
    banner = db.Column(db.String(500), nullable=True)
    content = db.Column(db.JSON, nullable=True)
    tags = db.Column(db.JSON, nullable=False, default=list)
    draft = db.Column(db.Boolean, nullable=False, default=False)

    # 👤 Autor
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    author = db.relationship("User", lazy="joined")

    # 📈 activity
    total_reads = db.Column(db.Integer, nullable=False, default=0)

    # ⏰ Timestamps
    published_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, onupdate=datetime.utcnow)

    def to_summary(self):
        """Forma que usa el listado de últimos blogs."""
        return {
            "blog_id": self.blog_id,
            "title": self.title,
            "des": self.des,
            "banner": self.banner,
            "activity": {"total_reads": self.total_reads},
            "tags": self.tags or [],
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "author": self.author.public_info() if self.author else None,
        }

    def to_dict(self):
        data = self.to_summary()
        data.update({
            "content": self.content,
            "draft": self.draft,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        })
        return data

    def __repr__(self):
        return f"<Blog {self.blog_id}>"
