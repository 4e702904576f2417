from datetime import datetime
from blogsite.extensions import db

DEFAULT_PROFILE_IMG = "https://api.dicebear.com/6.x/notionists-neutral/svg?seed={username}"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)

    # 👤 personal_info
    fullname = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False, unique=True)
    username = db.Column(db.String(60), nullable=False, unique=True)
    password = db.Column(db.String(255), nullable=False)  # hash bcrypt, nunca el texto plano
    profile_img = db.Column(db.String(255), nullable=True)

    # 📊 account_info
    total_posts = db.Column(db.Integer, nullable=False, default=0)
    total_reads = db.Column(db.Integer, nullable=False, default=0)

    joined_at = db.Column(db.DateTime, default=datetime.utcnow)

    owned_blogs = db.relationship("OwnedBlog", lazy="select", cascade="all, delete-orphan")

    @property
    def blog_ids(self):
        return [entry.blog_ref for entry in self.owned_blogs]

    def public_info(self):
        """Campos que se pueden mostrar junto a un blog."""
        return {
            "personal_info": {
                "fullname": self.fullname,
                "username": self.username,
                "profile_img": self.profile_img,
            }
        }

    def __repr__(self):
        return f"<User {self.username}>"


class OwnedBlog(db.Model):
    """Conjunto de blogs de un usuario. Sin FK al blog: se limpia a mano al borrarlo."""
    __tablename__ = "user_blogs"
    __table_args__ = (db.UniqueConstraint("user_id", "blog_ref", name="uq_user_blog"),)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    blog_ref = db.Column(db.Integer, nullable=False)  # blogs.id
    added_at = db.Column(db.DateTime, default=datetime.utcnow)
