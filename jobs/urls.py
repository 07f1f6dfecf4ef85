"""
Jobs app URLs
"""
from django.urls import path

from .views import CoverLetterView, JobTypeListView, QuestionView, ResumeView, ScrapeView

urlpatterns = [
    path('resume/', ResumeView.as_view(), name='job-agent-resume'),
    path('cover-letter/', CoverLetterView.as_view(), name='job-agent-cover-letter'),
    path('question/', QuestionView.as_view(), name='job-agent-question'),
    path('scrape/', ScrapeView.as_view(), name='job-agent-scrape'),
    path('job-types/', JobTypeListView.as_view(), name='job-agent-job-types'),
]
