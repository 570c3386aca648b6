"""
ChooJobs web client.

Server-rendered front end for the ChooJobs job marketplace API:
1. Browse and filter scraped job listings
2. Upload resumes and export them
3. Run AI match analysis of a resume against a job
4. Save jobs and track applications
5. Upgrade to the Pro plan
"""

__version__ = "1.0.0"
