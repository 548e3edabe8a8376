from tests.base import JenkinsTestBase


class JenkinsJobsTestBase(JenkinsTestBase):

    config_xml = """
        <matrix-project>
            <actions/>
            <description>Foo</description>
        </matrix-project>"""

    def job_info(self, name, **kwargs):
        info = {
            u'name': name,
            u'color': u'blue',
            u'description': u'Foo',
            u'inQueue': False,
        }
        info.update(kwargs)
        return info


class JenkinsGetJobsTestBase(JenkinsJobsTestBase):

    jobs_in_folder = [
        {'jobs': [
            {'name': 'my_job1', 'color': 'blue', 'url': 'http://...'},
            {'name': 'my_folder1', 'url': 'http://...', 'jobs': [{}, {}]},
            {'name': 'my_job2', 'color': 'blue', 'url': 'http://...'}
        ]},
        # my_folder1 jobs
        {'jobs': [
            {'name': 'my_job3', 'color': 'blue', 'url': 'http://...'},
            {'name': 'my_job4', 'color': 'blue', 'url': 'http://...'}
        ]}
    ]
