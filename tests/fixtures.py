"""Effective build descriptions used across tests."""

from __future__ import annotations

EFFECTIVE_XML = """\
<forge>
  <project>
    <group>groupgroup</group>
    <name>Gradle Test Project</name>
    <version>0.1-SNAPSHOT</version>
    <projectPath>:</projectPath>
    <rootProjectDirectory>/home/user/projects/loader</rootProjectDirectory>
    <packaging>jar</packaging>
    <archivePath>build/libs/Gradle Test Project-0.1-SNAPSHOT.jar</archivePath>
    <sourceCompatibility>1.6</sourceCompatibility>
    <targetCompatibility>1.7</targetCompatibility>
    <tasks>
      <task>
        <name>zxyz</name>
        <dependsOn>
          <task>build</task>
          <task>test</task>
        </dependsOn>
      </task>
      <task>
        <name>build</name>
        <dependsOn>
          <task>test</task>
        </dependsOn>
      </task>
      <task>
        <name>test</name>
        <type>org.gradle.api.tasks.testing.Test</type>
        <dependsOn/>
      </task>
    </tasks>
    <dependencies>
      <dependency>
        <group>org.gradle</group>
        <name>gradle-tooling-api</name>
        <version>1.6</version>
        <configuration>runtime</configuration>
        <artifacts>
          <artifact>
            <classifier>cl</classifier>
            <type>ear</type>
          </artifact>
        </artifacts>
      </dependency>
      <dependency>
        <group>org.gradle</group>
        <name>gradle-tooling-api</name>
        <version>1.6</version>
        <configuration>compile</configuration>
        <artifacts>
          <artifact>
            <classifier>cl</classifier>
            <type>ear</type>
          </artifact>
        </artifacts>
        <excludeRules>
          <excludeRule>
            <group>org.gradle</group>
            <module>gradle-core</module>
          </excludeRule>
        </excludeRules>
      </dependency>
      <dependency>
        <group>junit</group>
        <name>junit</name>
        <version>4.11</version>
        <configuration>testCompile</configuration>
        <artifacts>
          <artifact>
            <classifier></classifier>
            <type>pom</type>
          </artifact>
        </artifacts>
      </dependency>
      <dependency>
        <group>junit</group>
        <name>junit</name>
        <version>4.11</version>
        <configuration>testRuntime</configuration>
        <artifacts>
          <artifact>
            <type>pom</type>
          </artifact>
        </artifacts>
      </dependency>
      <dependency>
        <group>x</group>
        <name>y</name>
        <version>z</version>
        <configuration>testRuntime</configuration>
        <artifacts>
          <artifact>
            <classifier>clas</classifier>
            <type></type>
          </artifact>
        </artifacts>
      </dependency>
    </dependencies>
    <managedDependencies>
      <dependency>
        <group>com.google.guava</group>
        <name>guava</name>
        <version>14.0.1</version>
        <configuration>compile</configuration>
        <artifacts>
          <artifact>
            <classifier>forge</classifier>
            <type>dll</type>
          </artifact>
        </artifacts>
        <excludeRules>
          <excludeRule>
            <group>org.abc</group>
            <module>xyz</module>
          </excludeRule>
        </excludeRules>
      </dependency>
    </managedDependencies>
    <plugins>
      <plugin><class>org.gradle.api.plugins.JavaPlugin</class></plugin>
      <plugin><class>org.gradle.api.plugins.GroovyPlugin</class></plugin>
      <plugin><class>org.gradle.plugins.ide.eclipse.EclipsePlugin</class></plugin>
      <plugin><class>com.example.CustomPlugin</class></plugin>
    </plugins>
    <repositories>
      <repository>
        <name>maven</name>
        <url>http://repo.gradle.org/gradle/libs-releases-local/</url>
      </repository>
      <repository>
        <name>MavenRepo</name>
        <url>https://repo1.maven.org/maven2/</url>
      </repository>
    </repositories>
    <sourceSets>
      <sourceSet>
        <name>main</name>
        <java>
          <directory>src/main/java</directory>
          <directory>src/main/alter</directory>
        </java>
        <resources>
          <directory>src/main/resources</directory>
        </resources>
      </sourceSet>
      <sourceSet>
        <name>test</name>
        <java>
          <directory>src/test/java</directory>
        </java>
        <resources>
          <directory>src/test/resources</directory>
        </resources>
      </sourceSet>
    </sourceSets>
    <properties>
      <property>
        <key>someProperty</key>
        <value>value</value>
      </property>
      <property>
        <key>version</key>
        <value>0.1-SNAPSHOT</value>
      </property>
    </properties>
  </project>
</forge>
"""

MINIMAL_XML = "<forge><project><name>minimal</name></project></forge>"

BUILD_SCRIPT = """\
dependency compile org.gradle:gradle-tooling-api:1.6:cl@ear
dependency testCompile junit:junit:4.11@pom
direct com.example:direct-lib
managed import org.springframework:spring-framework-bom:4.0.0@pom
plugin java
plugin groovy
repository http://repo.gradle.org/gradle/libs-releases-local/
property group=groupgroup
property ext.someProperty=value
"""
